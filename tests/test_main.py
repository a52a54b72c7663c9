from fastapi import FastAPI

import app.main as main_module


def test_main_runs_uvicorn_with_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TIME_API_HOST", "0.0.0.0")
    monkeypatch.setenv("TIME_API_PORT", "9000")
    monkeypatch.setenv("TIME_API_LOG_DIR", str(tmp_path / "logs"))

    logging_calls = []
    run_calls = []
    monkeypatch.setattr(main_module, "setup_logging", lambda **kwargs: logging_calls.append(kwargs))
    monkeypatch.setattr(main_module.uvicorn, "run", lambda app, **kwargs: run_calls.append((app, kwargs)))

    main_module.main()

    assert logging_calls[0]["log_dir"] == str(tmp_path / "logs")
    app, kwargs = run_calls[0]
    assert isinstance(app, FastAPI)
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 9000


def test_module_level_app_serves_time():
    routes = {route.path for route in main_module.app.routes}

    assert "/api/time" in routes
    assert "/openapi/v1.json" in routes

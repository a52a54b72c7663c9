import json
import logging
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.clock import Clock, SystemClock
from app.config import Settings
from app.endpoints.time import router as time_router
from app.errors import ClockReadError
from custom_logging import setup_logging

logger = logging.getLogger(__name__)

API_TITLE = "Time API"
API_VERSION = "v1"


class IndentedJSONResponse(JSONResponse):
    """JSON response pretty-printed with a two-space indent."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=2,
        ).encode("utf-8")


async def clock_read_error_handler(request: Request, exc: ClockReadError) -> JSONResponse:
    logger.error("Clock read failed for %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


def create_app(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> FastAPI:
    """
    Build the time API application.

    Args:
        settings: Application settings, read from the environment if omitted
        clock: Source of the current instant, the system clock if omitted

    Returns:
        The configured FastAPI application
    """
    settings = settings or Settings()

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        openapi_url=settings.openapi_url,
        docs_url=settings.docs_url if settings.enable_docs else None,
        redoc_url=None,
        default_response_class=IndentedJSONResponse if settings.pretty_json else JSONResponse,
    )
    app.state.clock = clock or SystemClock()

    app.include_router(time_router)
    app.add_exception_handler(ClockReadError, clock_read_error_handler)

    return app


app = create_app()


def main() -> None:
    settings = Settings()
    log_file = setup_logging(
        log_dir=settings.log_dir,
        level=settings.log_level,
        max_bytes=settings.log_max_bytes,
    )
    logger.info("Starting %s on %s:%s (log file: %s)", API_TITLE, settings.host, settings.port, log_file)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

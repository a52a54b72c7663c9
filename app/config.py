"""Application settings."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings."""

    host: str = "127.0.0.1"
    port: int = 8000
    log_dir: str = "logs"
    log_level: LogLevel = "INFO"
    log_max_bytes: int = 10_000_000
    # Indent JSON responses for readability
    pretty_json: bool = True
    enable_docs: bool = True
    docs_url: str = "/"
    openapi_url: str = "/openapi/v1.json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="TIME_API_",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value

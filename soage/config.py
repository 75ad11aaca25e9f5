"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class ServiceConfig(BaseSettings):
    """Configuration for the soage lookup service."""

    # HTTP server
    host: str = "0.0.0.0"
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("SOAGE_PORT", "PORT", "port"),
    )
    cors_origins: list[str] = ["*"]

    # Upstream Stack Exchange API
    api_base_url: str = "https://api.stackexchange.com/2.3"
    site: str = "stackoverflow"
    response_filter: str = "!9YdnSIN18"
    max_candidates: int = 5
    request_timeout_seconds: float = 5.0
    api_key: str | None = None

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "SOAGE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

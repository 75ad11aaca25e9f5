"""Structlog configuration for soage."""

import logging
import sys

import structlog

from soage.config import ServiceConfig, LogFormat
from soage.exceptions import ConfigError


def configure_logging(config: ServiceConfig | None = None) -> None:
    """
    Configure structlog with appropriate processors and output format.

    Args:
        config: ServiceConfig instance, uses defaults if None

    Raises:
        ConfigError: If the configured log level is unknown
    """
    if config is None:
        config = ServiceConfig()

    log_level = logging.getLevelName(config.log_level.upper())
    if not isinstance(log_level, int):
        raise ConfigError(f"Unknown log level: {config.log_level}")

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional logger name for context

    Returns:
        Configured structlog BoundLogger
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()

"""Structured logging for soage."""

from soage.logging.setup import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]

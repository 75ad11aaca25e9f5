"""Custom exception hierarchy for soage."""

from typing import Any


class SoageError(Exception):
    """Base exception for all soage errors."""


class InvalidFormatError(SoageError):
    """Lookup key failed validation."""


class ProfileNotFoundError(SoageError):
    """No Stack Overflow user matched the lookup key."""


class UpstreamError(SoageError):
    """Stack Exchange API call failed (HTTP error, timeout or network)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class ConfigError(SoageError):
    """Invalid configuration."""

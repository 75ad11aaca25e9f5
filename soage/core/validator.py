"""Lookup key validation, applied before any upstream call."""

import re

from soage.exceptions import InvalidFormatError

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9 -]{1,40}")
USER_ID_PATTERN = re.compile(r"[1-9][0-9]*")


def validate_username(value: str | None) -> str:
    """
    Check a Stack Overflow display name used for search.

    Returns:
        The username unchanged

    Raises:
        InvalidFormatError: If empty, longer than 40 characters, or containing
            anything other than letters, digits, spaces and hyphens
    """
    if not value:
        raise InvalidFormatError("Username is required")
    if not USERNAME_PATTERN.fullmatch(value):
        raise InvalidFormatError(
            "Invalid username format. Stack Overflow usernames must be 1-40 "
            "characters using letters, numbers, spaces, or hyphens."
        )
    return value


def validate_user_id(value: str | None) -> int:
    """
    Check a numeric Stack Overflow user id.

    Returns:
        The id as an int

    Raises:
        InvalidFormatError: If empty, not all ASCII digits, or with a leading zero
    """
    if not value:
        raise InvalidFormatError("User ID is required")
    if not USER_ID_PATTERN.fullmatch(value):
        raise InvalidFormatError("Invalid user ID format. Must be a positive integer.")
    return int(value)

"""Unit tests for lookup key validation - pure functions, no internet."""

import pytest

from soage.core.validator import validate_username, validate_user_id
from soage.exceptions import InvalidFormatError


class TestValidateUsername:
    """Test display name validation."""

    @pytest.mark.parametrize("username", [
        "a",
        "Jon Skeet",
        "user-123",
        "A" * 40,
        "  leading spaces",
        "---",
    ])
    def test_accepts_valid(self, username: str):
        assert validate_username(username) == username

    @pytest.mark.parametrize("username", [
        "A" * 41,
        "jon_skeet",
        "jon.skeet",
        "jon@skeet",
        "tab\there",
        "new\nline",
        "Zoë",
        "名前",
        "name/slash",
    ])
    def test_rejects_invalid(self, username: str):
        with pytest.raises(InvalidFormatError, match="Invalid username format"):
            validate_username(username)

    @pytest.mark.parametrize("username", ["", None])
    def test_rejects_empty(self, username):
        with pytest.raises(InvalidFormatError, match="Username is required"):
            validate_username(username)

    def test_trailing_newline_rejected(self):
        """A lone trailing newline must not slip past the pattern."""
        with pytest.raises(InvalidFormatError):
            validate_username("jon\n")


class TestValidateUserId:
    """Test numeric id validation."""

    @pytest.mark.parametrize("raw,expected", [
        ("1", 1),
        ("22656", 22656),
        ("9007199254740993", 9007199254740993),
    ])
    def test_accepts_positive_integers(self, raw: str, expected: int):
        assert validate_user_id(raw) == expected

    @pytest.mark.parametrize("raw", [
        "0",
        "0123",
        "-5",
        "+5",
        "12a",
        "1.5",
        " 12",
        "12 ",
        "١٢",
    ])
    def test_rejects_invalid(self, raw: str):
        with pytest.raises(InvalidFormatError, match="Must be a positive integer"):
            validate_user_id(raw)

    @pytest.mark.parametrize("raw", ["", None])
    def test_rejects_empty(self, raw):
        with pytest.raises(InvalidFormatError, match="User ID is required"):
            validate_user_id(raw)

"""Unit tests for normalization and derived fields - uses JSON fixtures, no internet."""

import json
from pathlib import Path

import pytest

from soage.core.normalizer import (
    ACCURACY_RANGE,
    AVATAR_PLACEHOLDER,
    CONFIDENCE_EXACT,
    CONFIDENCE_MULTIPLE,
    account_age,
    age_days,
    disambiguate,
    normalize,
)
from soage.models.raw import RawProfile

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DAY = 86400
CREATED = 1222430705


def load_items(name: str) -> list[RawProfile]:
    """Load raw upstream items from a JSON fixture."""
    payload = json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))
    return [RawProfile.model_validate(item) for item in payload["items"]]


class TestAgeDays:
    """Test whole-day age computation."""

    def test_exact_days(self):
        assert age_days(CREATED, now=CREATED + 400 * DAY) == 400

    def test_partial_day_floors(self):
        assert age_days(CREATED, now=CREATED + 2 * DAY - 1) == 1

    def test_same_instant_is_zero(self):
        assert age_days(CREATED, now=CREATED) == 0

    def test_future_creation_is_negative(self):
        assert age_days(CREATED, now=CREATED - 10 * DAY) == -10
        assert age_days(CREATED, now=CREATED - 1) == -1

    def test_non_decreasing_over_time(self):
        samples = [age_days(CREATED, now=CREATED + offset) for offset in range(-30 * DAY, 30 * DAY, 3571)]
        assert samples == sorted(samples)

    def test_defaults_to_wall_clock(self):
        assert age_days(CREATED) > 6000


class TestAccountAge:
    """Test the 365/30-day human-readable age."""

    @pytest.mark.parametrize("days,expected", [
        (0, "0 months"),
        (29, "0 months"),
        (45, "1 months"),
        (364, "12 months"),
        (365, "1 years, 0 months"),
        (400, "1 years, 1 months"),
        (730, "2 years, 0 months"),
        (6236, "17 years, 1 months"),
    ])
    def test_rendering(self, days: int, expected: str):
        assert account_age(CREATED, now=CREATED + days * DAY) == expected

    @pytest.mark.parametrize("days,expected", [
        (-1, "-1 months"),
        (-45, "-2 months"),
        (-400, "-2 months"),
    ])
    def test_future_creation(self, days: int, expected: str):
        assert account_age(CREATED, now=CREATED + days * DAY) == expected


class TestNormalize:
    """Test RawProfile -> NormalizedProfile."""

    def test_full_profile(self):
        raw = load_items("users_single")[0]
        profile = normalize(raw, now=CREATED + 400 * DAY)

        assert profile.username == "Jon Skeet"
        assert profile.nickname == "Jon Skeet"
        assert profile.estimated_creation_date == "2008-09-26"
        assert profile.account_age == "1 years, 1 months"
        assert profile.age_days == 400
        assert profile.followers == "1501216"
        assert profile.total_posts == 9226 + 9241 + 877
        assert profile.verified == "Standard"
        assert profile.description == "N/A"
        assert profile.region == "Reading, United Kingdom"
        assert profile.user_id == "22656"
        assert profile.avatar.startswith("https://www.gravatar.com/")
        assert profile.estimation_confidence == CONFIDENCE_EXACT
        assert profile.accuracy_range == ACCURACY_RANGE
        assert profile.profile_link == "https://stackoverflow.com/users/22656/jon-skeet"

    def test_employee_with_bio(self):
        raw = load_items("users_multiple")[1]
        profile = normalize(raw)

        assert profile.verified == "Stack Overflow Employee"
        assert profile.description == "<p>Community team.</p>"
        assert profile.total_posts == 6

    def test_defaults_for_missing_fields(self):
        raw = load_items("users_multiple")[2]
        profile = normalize(raw)

        assert profile.total_posts == 0
        assert profile.region == "N/A"
        assert profile.description == "N/A"
        assert profile.avatar == AVATAR_PLACEHOLDER
        assert profile.profile_link == "https://stackoverflow.com/users/18765432"

    def test_partial_badge_counts(self):
        raw = RawProfile(
            user_id=7,
            display_name="partial",
            creation_date=CREATED,
            reputation=0,
            badge_counts={"gold": None, "bronze": 4},
        )
        assert normalize(raw).total_posts == 4

    def test_stringifies_numbers(self):
        raw = RawProfile(user_id=1, display_name="x", creation_date=CREATED, reputation=0)
        profile = normalize(raw)
        assert profile.user_id == "1"
        assert profile.followers == "0"


class TestDisambiguate:
    """Test confidence override for multiple matches."""

    def test_single_profile_unchanged(self):
        profiles = [normalize(load_items("users_single")[0])]
        result = disambiguate(profiles)
        assert result[0].estimation_confidence == CONFIDENCE_EXACT

    def test_multiple_profiles_medium(self):
        profiles = [normalize(raw) for raw in load_items("users_multiple")]
        result = disambiguate(profiles)

        assert len(result) == 3
        assert all(p.estimation_confidence == CONFIDENCE_MULTIPLE for p in result)
        assert [p.user_id for p in result] == ["650123", "8123456", "18765432"]

    def test_does_not_mutate_input(self):
        profiles = [normalize(raw) for raw in load_items("users_multiple")]
        disambiguate(profiles)
        assert profiles[0].estimation_confidence == CONFIDENCE_EXACT

"""Normalization of raw Stack Exchange users into response profiles."""

import math
import time
from datetime import datetime, timezone

from soage.models.profile import NormalizedProfile
from soage.models.raw import RawProfile

SECONDS_PER_DAY = 86400
DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30

AVATAR_PLACEHOLDER = "https://via.placeholder.com/50"
PROFILE_URL_TEMPLATE = "https://stackoverflow.com/users/{user_id}"

CONFIDENCE_EXACT = "High (exact match)"
CONFIDENCE_MULTIPLE = "Medium (multiple matches found)"
ACCURACY_RANGE = "Second-level (API provides precise timestamp)"
DISAMBIGUATION_NOTE = (
    "Multiple users found with similar names. "
    "Use the user_id or profile_link to select the correct user."
)


def age_days(created_at: int, now: float | None = None) -> int:
    """
    Whole days elapsed since `created_at`.

    Args:
        created_at: Account creation time in epoch seconds
        now: Reference time in epoch seconds, defaults to the wall clock

    Returns:
        Floor of elapsed seconds / 86400, negative if `created_at` is ahead of `now`
    """
    if now is None:
        now = time.time()
    return int((now - created_at) // SECONDS_PER_DAY)


def account_age(created_at: int, now: float | None = None) -> str:
    """
    Human-readable account age using 365-day years and 30-day months.

    Examples:
        400 days -> "1 years, 1 months"
        45 days -> "1 months"
    """
    days = age_days(created_at, now)
    years = days // DAYS_PER_YEAR
    # remainder keeps the sign of days
    months = math.floor(math.fmod(days, DAYS_PER_YEAR) / DAYS_PER_MONTH)
    if years > 0:
        return f"{years} years, {months} months"
    return f"{months} months"


def total_posts(raw: RawProfile) -> int:
    """Sum of gold, silver and bronze badges, absent counts as zero."""
    badges = raw.badge_counts
    if badges is None:
        return 0
    return (badges.gold or 0) + (badges.silver or 0) + (badges.bronze or 0)


def normalize(raw: RawProfile, now: float | None = None) -> NormalizedProfile:
    """
    Transform a raw upstream user into a NormalizedProfile.

    Args:
        raw: Validated upstream record
        now: Reference time for the derived age fields

    Returns:
        Profile with High confidence and defaults filled in
    """
    created = datetime.fromtimestamp(raw.creation_date, tz=timezone.utc)

    return NormalizedProfile(
        username=raw.display_name,
        nickname=raw.display_name,
        estimated_creation_date=created.date().isoformat(),
        account_age=account_age(raw.creation_date, now),
        age_days=age_days(raw.creation_date, now),
        followers=str(raw.reputation),
        total_posts=total_posts(raw),
        verified="Stack Overflow Employee" if raw.is_employee else "Standard",
        description=raw.about_me or "N/A",
        region=raw.location or "N/A",
        user_id=str(raw.user_id),
        avatar=raw.profile_image or AVATAR_PLACEHOLDER,
        estimation_confidence=CONFIDENCE_EXACT,
        accuracy_range=ACCURACY_RANGE,
        profile_link=raw.link or PROFILE_URL_TEMPLATE.format(user_id=raw.user_id),
    )


def disambiguate(profiles: list[NormalizedProfile]) -> list[NormalizedProfile]:
    """Downgrade confidence on every profile when more than one matched."""
    if len(profiles) < 2:
        return profiles
    return [
        p.model_copy(update={"estimation_confidence": CONFIDENCE_MULTIPLE})
        for p in profiles
    ]

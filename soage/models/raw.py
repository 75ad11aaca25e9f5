"""Upstream Stack Exchange user record."""

from pydantic import BaseModel


class BadgeCounts(BaseModel):
    """Badge totals as reported by the users endpoint."""

    gold: int | None = None
    silver: int | None = None
    bronze: int | None = None


class RawProfile(BaseModel):
    """A single item from the Stack Exchange `/users` response."""

    model_config = {"extra": "ignore"}

    user_id: int
    display_name: str
    creation_date: int
    reputation: int
    badge_counts: BadgeCounts | None = None
    about_me: str | None = None
    location: str | None = None
    profile_image: str | None = None
    link: str | None = None
    is_employee: bool = False

"""Lookup result wrapper model."""

from datetime import datetime

from pydantic import BaseModel

from soage.models.profile import NormalizedProfile


class LookupResult(BaseModel):
    """Outcome of one username or id lookup with at least one match."""

    query: str
    users: list[NormalizedProfile]
    note: str | None = None
    fetched_at: datetime
    duration_ms: float

    @property
    def is_multiple(self) -> bool:
        return len(self.users) > 1

    @property
    def profile(self) -> NormalizedProfile:
        """The first (or only) matched profile."""
        return self.users[0]

"""Pydantic models for soage."""

from soage.models.raw import BadgeCounts, RawProfile
from soage.models.profile import NormalizedProfile
from soage.models.result import LookupResult

__all__ = [
    "BadgeCounts",
    "RawProfile",
    "NormalizedProfile",
    "LookupResult",
]

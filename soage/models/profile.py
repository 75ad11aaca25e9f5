"""Normalized profile data model."""

from pydantic import BaseModel


class NormalizedProfile(BaseModel):
    """Outward-facing summary of a Stack Overflow user."""

    username: str
    nickname: str
    estimated_creation_date: str
    account_age: str
    age_days: int
    followers: str
    total_posts: int
    verified: str
    description: str
    region: str
    user_id: str
    avatar: str
    estimation_confidence: str
    accuracy_range: str
    profile_link: str

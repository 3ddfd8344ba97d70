"""Requests and Response models"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

MIN_SCORE = 0
MAX_SCORE = 10


# --- REQUEST MODELS ---
class GameRatingRequest(BaseModel):
    """Body of POST and PUT /game-ratings. A missing id means 'not yet stored'."""

    id: Optional[int] = None
    score: Optional[int] = None
    comment: Optional[str] = None
    rated_at: Optional[datetime] = None
    game_id: Optional[int] = None

    @field_validator("score")
    @classmethod
    def validate_score(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        if not MIN_SCORE <= value <= MAX_SCORE:
            raise ValueError(
                f"Score must lie between {MIN_SCORE} and {MAX_SCORE}, got {value}."
            )
        return value

    @field_validator("rated_at")
    @classmethod
    def validate_rated_at(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Stored as naive UTC: offsets are applied, naive values are taken to be UTC already."""
        if value is None or value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)


# --- RESPONSE MODELS ---
class GameRatingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    score: Optional[int]
    comment: Optional[str]
    rated_at: Optional[datetime]
    game_id: Optional[int]

    @field_validator("rated_at")
    @classmethod
    def mark_rated_at_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None or value.tzinfo is not None:
            return value
        return value.replace(tzinfo=timezone.utc)


class GameRatingPage(BaseModel):
    content: list[GameRatingResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int
    has_next: bool
    has_previous: bool


class FailureResponse(BaseModel):
    entity_name: str
    error_key: str
    message: str

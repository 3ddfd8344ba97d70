"""Protocol repository (SQLAlchemy today, anything offering the same four methods tomorrow)"""

from typing import Protocol

from src.core.models import GameRatingModel, Page, PageRequest, RatingId


class RatingRepository(Protocol):
    """Persistence layer orchestration"""

    def save(self, rating: GameRatingModel) -> GameRatingModel:
        """Insert a new rating (no ID) or overwrite the one with the same ID. Returns the stored data, ID included."""
        ...

    def find_all(self, page_request: PageRequest) -> Page:
        """Get one page of ratings, ordered as requested."""
        ...

    def find_one(self, rating_id: RatingId) -> GameRatingModel | None:
        """Get rating by ID, if record exists."""
        ...

    def delete(self, rating_id: RatingId) -> None:
        """Remove a rating's record. Unknown IDs are ignored."""
        ...

"""Orchestration of communication from API router to persistence layer (and the reverse direction)."""

import logging

from src.api.models import GameRatingPage, GameRatingRequest, GameRatingResponse
from src.core.models import GameRatingModel, Page, PageRequest, RatingId
from src.db.repository import RatingRepository

logger = logging.getLogger(__name__)


class GameRatingService:
    """Orchestration of layers for game ratings."""

    def __init__(self, repository: RatingRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def save(self, request: GameRatingRequest) -> GameRatingResponse:
        """Store a rating. New when it has no ID, otherwise overwrites whatever is stored under that ID."""
        logger.debug("Request to save GameRating : %s", request)
        stored = self.repo.save(self._to_model(request))
        return self._create_rating_response(stored)

    def find_all(self, page_request: PageRequest) -> GameRatingPage:
        """Get one page of ratings."""
        logger.debug("Request to get all GameRatings, %s", page_request)
        page = self.repo.find_all(page_request)
        return self._create_page_response(page)

    def find_one(self, rating_id: RatingId) -> GameRatingResponse | None:
        """Get one rating by ID, or None if there is no such rating."""
        logger.debug("Request to get GameRating : %s", rating_id)
        rating = self.repo.find_one(rating_id)
        if rating is None:
            return None
        return self._create_rating_response(rating)

    def delete(self, rating_id: RatingId) -> None:
        """Handle a request to delete a GameRating record."""
        logger.debug("Request to delete GameRating : %s", rating_id)
        self.repo.delete(rating_id)

    # -- Internal helpers --
    def _to_model(self, request: GameRatingRequest) -> GameRatingModel:
        return GameRatingModel(
            id=request.id,
            score=request.score,
            comment=request.comment,
            rated_at=request.rated_at,
            game_id=request.game_id,
        )

    def _create_rating_response(self, model: GameRatingModel) -> GameRatingResponse:
        return GameRatingResponse.model_validate(model)

    def _create_page_response(self, page: Page) -> GameRatingPage:
        return GameRatingPage(
            content=[self._create_rating_response(r) for r in page.content],
            page=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )

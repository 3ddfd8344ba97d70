"""Implementation of (Rating)Repository using SQLAlchemy"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import GameRatingModel, Page, PageRequest, RatingId
from src.core.shared_types import SortDirection
from src.db.schema import DBGameRating

logger = logging.getLogger(__name__)


class SQLRatingRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def save(self, rating: GameRatingModel) -> GameRatingModel:
        """Insert a new rating (no ID) or overwrite the one with the same ID. Returns the stored data, ID included."""
        rating_db = self._to_db(rating)
        try:
            if rating.id is None:
                self.db.add(rating_db)
            else:
                # merge() inserts when nothing is stored under this ID yet
                rating_db = self.db.merge(rating_db)
            self.db.commit()
            self.db.refresh(rating_db)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not save rating {rating.id=}.") from exc
        return self._to_model(rating_db)

    def find_all(self, page_request: PageRequest) -> Page:
        """Get one page of ratings, ordered as requested. A page past the last record is empty."""
        try:
            total = self.db.scalar(select(func.count()).select_from(DBGameRating)) or 0
            ratings_db = []
            # offsets past the end are never sent to the database (they may not fit its integers)
            if page_request.offset < total:
                query = (
                    select(DBGameRating)
                    .order_by(*self._order_by(page_request))
                    .offset(page_request.offset)
                    .limit(page_request.size)
                )
                ratings_db = self.db.scalars(query).all()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError("Could not fetch a page of ratings.") from exc

        return Page(
            content=[self._to_model(r) for r in ratings_db],
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    def find_one(self, rating_id: RatingId) -> GameRatingModel | None:
        """Get rating by ID, if record exists."""
        rating_db = self._fetch_rating(rating_id)
        if rating_db:
            return self._to_model(rating_db)
        return None

    def delete(self, rating_id: RatingId) -> None:
        """Remove a rating's record. Unknown IDs are ignored."""
        rating_db = self._fetch_rating(rating_id)
        if not rating_db:
            logger.debug("No rating with id=%s to delete", rating_id)
            return
        try:
            self.db.delete(rating_db)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not delete rating {rating_id=}.") from exc

    def _fetch_rating(self, rating_id: RatingId) -> DBGameRating | None:
        query = select(DBGameRating).where(DBGameRating.id == rating_id)
        try:
            return self.db.scalar(query)
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not fetch rating {rating_id=}.") from exc

    def _order_by(self, page_request: PageRequest) -> list:
        """Translate (field, direction) pairs into ORDER BY clauses. Always ends on id, so pages are stable."""
        clauses = []
        for field_name, direction in page_request.sort:
            column = getattr(DBGameRating, field_name)
            clauses.append(column.desc() if direction == SortDirection.DESC else column.asc())
        if not any(name == "id" for name, _ in page_request.sort):
            clauses.append(DBGameRating.id.asc())
        return clauses

    def _to_db(self, rating: GameRatingModel) -> DBGameRating:
        """Convert data transfer model to SQLAlchemy model."""
        return DBGameRating(
            id=rating.id,
            score=rating.score,
            comment=rating.comment,
            rated_at=rating.rated_at,
            game_id=rating.game_id,
        )

    def _to_model(self, rating_db: DBGameRating) -> GameRatingModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameRatingModel(
            id=rating_db.id,
            score=rating_db.score,
            comment=rating_db.comment,
            rated_at=rating_db.rated_at,
            game_id=rating_db.game_id,
        )

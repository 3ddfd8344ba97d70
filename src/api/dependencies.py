"""
Shared dependencies for the FastAPI application.
Wires a database session into the service that handles a request.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from src.db.database import get_db
from src.db.sql_repository import SQLRatingRepository
from src.services.rating_service import GameRatingService


def get_rating_service(db: Session = Depends(get_db)) -> GameRatingService:
    """One service (and repository) per request, bound to that request's session."""
    return GameRatingService(SQLRatingRepository(db))

"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.api.dependencies import get_rating_service
from src.core.exceptions import RepositoryError
from src.core.models import GameRatingModel, Page, PageRequest, RatingId
from src.db.schema import Base
from src.db.sql_repository import SQLRatingRepository
from src.main import create_app
from src.services.rating_service import GameRatingService

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


# --- MOCK DEPENDENCIES ----
class MockRepository:
    """Mock the RatingRepository using a dictionary of rating models. Counts calls to save()."""

    def __init__(self) -> None:
        self._ratings: dict[RatingId, GameRatingModel] = {}
        self._next_id = 1
        self.save_calls = 0

    def save(self, rating: GameRatingModel) -> GameRatingModel:
        self.save_calls += 1
        if rating.id is None:
            rating = GameRatingModel(**{**vars(rating), "id": self._next_id})
            self._next_id += 1
        self._ratings[rating.id] = rating
        return rating

    def find_all(self, page_request: PageRequest) -> Page:
        ordered = [self._ratings[k] for k in sorted(self._ratings)]
        start = page_request.offset
        return Page(
            content=ordered[start : start + page_request.size],
            page=page_request.page,
            size=page_request.size,
            total_elements=len(ordered),
        )

    def find_one(self, rating_id: RatingId) -> GameRatingModel | None:
        return self._ratings.get(rating_id)

    def delete(self, rating_id: RatingId) -> None:
        self._ratings.pop(rating_id, None)


class BrokenRepository(MockRepository):
    """Every call fails the way an unreachable database would."""

    def save(self, rating: GameRatingModel) -> GameRatingModel:
        raise RepositoryError("database is gone")

    def find_one(self, rating_id: RatingId) -> GameRatingModel | None:
        raise RepositoryError("database is gone")

    def find_all(self, page_request: PageRequest) -> Page:
        raise RepositoryError("database is gone")

    def delete(self, rating_id: RatingId) -> None:
        raise RepositoryError("database is gone")


@pytest.fixture
def mock_repository() -> MockRepository:
    return MockRepository()


@pytest.fixture
def client(db_session_repo: Session) -> TestClient:
    """HTTP client against the app, backed by the in-memory test database."""
    app = create_app()
    app.dependency_overrides[get_rating_service] = lambda: GameRatingService(
        SQLRatingRepository(db_session_repo)
    )
    return TestClient(app)


@pytest.fixture
def mock_client(mock_repository: MockRepository) -> TestClient:
    """HTTP client against the app, backed by the (inspectable) mock repository."""
    app = create_app()
    app.dependency_overrides[get_rating_service] = lambda: GameRatingService(
        mock_repository
    )
    return TestClient(app)


@pytest.fixture
def broken_client() -> TestClient:
    app = create_app()
    app.dependency_overrides[get_rating_service] = lambda: GameRatingService(
        BrokenRepository()
    )
    return TestClient(app)


@pytest.fixture
def anyio_backend() -> str:
    """Async tests use asyncio primitives (asyncio.gather), so run them on asyncio."""
    return "asyncio"

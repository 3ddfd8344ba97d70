"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and db layer (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer or API layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from datetime import datetime
from math import ceil
from typing import Optional

from src.core.config import DEFAULT_PAGE_SIZE
from src.core.shared_types import SortDirection

RatingId = int
SortOrder = tuple[str, SortDirection]


@dataclass
class GameRatingModel:
    """Transport-safe representation of a game rating used between API, Service and DB layers."""

    id: Optional[RatingId] = None
    score: Optional[int] = None
    comment: Optional[str] = None
    rated_at: Optional[datetime] = None
    game_id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


@dataclass
class PageRequest:
    """Which slice of the ratings to fetch, and in which order."""

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: list[SortOrder] = field(default_factory=list)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page:
    """One page of ratings plus what is needed to navigate to the others."""

    content: list[GameRatingModel]
    page: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total_elements / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 0

"""Database tables / schema"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBGameRating(Base):
    __tablename__ = "game_ratings"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    score: Mapped[Optional[int]]
    comment: Mapped[Optional[str]]
    rated_at: Mapped[Optional[datetime]]
    game_id: Mapped[Optional[int]] = mapped_column(index=True)

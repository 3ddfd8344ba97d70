from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from src.api.models import GameRatingRequest


def test_id_is_optional() -> None:
    """A rating that was never stored simply has no ID."""
    request = GameRatingRequest(score=7)
    assert request.id is None


def test_full_payload() -> None:
    request = GameRatingRequest(
        id=3,
        score=10,
        comment="buzzer beater",
        rated_at="2024-03-01T20:30:00",
        game_id=12,
    )
    assert request.id == 3
    assert request.rated_at == datetime(2024, 3, 1, 20, 30)


def test_score_is_optional() -> None:
    assert GameRatingRequest(comment="no score yet").score is None


@pytest.mark.parametrize("score", [0, 5, 10])
def test_valid_score(score: int) -> None:
    assert GameRatingRequest(score=score).score == score


@pytest.mark.parametrize(
    "score",
    [
        -1,  # below the scale
        11,  # above the scale
    ],
)
def test_invalid_score(score: int) -> None:
    with pytest.raises(ValidationError):
        _ = GameRatingRequest(score=score)


def test_rated_at_with_offset_is_converted_to_utc() -> None:
    request = GameRatingRequest(rated_at="2024-03-01T20:30:00+02:00")
    assert request.rated_at == datetime(2024, 3, 1, 18, 30)


def test_rated_at_aware_utc_is_kept() -> None:
    moment = datetime(2024, 3, 1, 20, 30, tzinfo=timezone(timedelta(hours=0)))
    assert GameRatingRequest(rated_at=moment).rated_at == datetime(2024, 3, 1, 20, 30)

"""
Game ratings routes.
Handles CRUD operations for game ratings; all storage decisions are left to the GameRatingService.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from src.api import headers
from src.api.dependencies import get_rating_service
from src.api.models import FailureResponse, GameRatingRequest, GameRatingResponse
from src.api.pagination import build_page_request, generate_pagination_headers
from src.core.config import API_PREFIX, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from src.core.exceptions import InvalidRequestError
from src.services.rating_service import GameRatingService

logger = logging.getLogger(__name__)

ENTITY_NAME = "gameRating"
RESOURCE_PATH = "/game-ratings"

router = APIRouter(prefix=RESOURCE_PATH, tags=["game ratings"])


def resource_url(rating_id: Optional[int] = None) -> str:
    url = f"{API_PREFIX}{RESOURCE_PATH}"
    return url if rating_id is None else f"{url}/{rating_id}"


def _create(
    rating: GameRatingRequest, service: GameRatingService, response: Response
) -> GameRatingResponse:
    if rating.id is not None:
        raise InvalidRequestError(
            "A new gameRating cannot already have an ID",
            entity_name=ENTITY_NAME,
            error_key="idexists",
        )
    result = service.save(rating)
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = resource_url(result.id)
    response.headers.update(
        headers.create_entity_creation_alert(ENTITY_NAME, str(result.id))
    )
    return result


@router.post(
    "",
    response_model=GameRatingResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": FailureResponse}},
)
def create_game_rating(
    rating: GameRatingRequest,
    response: Response,
    service: GameRatingService = Depends(get_rating_service),
):
    """
    Create a new game rating.
    Responds 400 if the rating already has an ID.
    """
    logger.debug("REST request to save GameRating : %s", rating)
    return _create(rating, service, response)


@router.put(
    "",
    response_model=GameRatingResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": FailureResponse}},
)
def update_game_rating(
    rating: GameRatingRequest,
    response: Response,
    service: GameRatingService = Depends(get_rating_service),
):
    """
    Update an existing game rating.
    A rating without an ID is created instead (201, same as POST).
    """
    logger.debug("REST request to update GameRating : %s", rating)
    if rating.id is None:
        return _create(rating, service, response)

    result = service.save(rating)
    response.headers.update(
        headers.create_entity_update_alert(ENTITY_NAME, str(rating.id))
    )
    return result


@router.get("", response_model=list[GameRatingResponse])
def get_all_game_ratings(
    response: Response,
    page: int = Query(0, ge=0, description="0-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: Optional[list[str]] = Query(None, description="field[,asc|desc], repeatable"),
    service: GameRatingService = Depends(get_rating_service),
):
    """
    Get a page of game ratings.
    Totals and navigation links travel in the X-Total-Count and Link headers.
    """
    logger.debug("REST request to get a page of GameRatings")
    result = service.find_all(build_page_request(page, size, sort))
    response.headers.update(generate_pagination_headers(result, resource_url()))
    return result.content


@router.get(
    "/{rating_id}",
    response_model=GameRatingResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "No such rating, empty body"}},
)
def get_game_rating(
    rating_id: int,
    service: GameRatingService = Depends(get_rating_service),
):
    logger.debug("REST request to get GameRating : %s", rating_id)
    result = service.find_one(rating_id)
    if result is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return result


@router.delete("/{rating_id}", status_code=status.HTTP_200_OK)
def delete_game_rating(
    rating_id: int,
    service: GameRatingService = Depends(get_rating_service),
):
    """Delete a game rating. Responds 200 whether or not the rating existed."""
    logger.debug("REST request to delete GameRating : %s", rating_id)
    service.delete(rating_id)
    return Response(
        status_code=status.HTTP_200_OK,
        headers=headers.create_entity_deletion_alert(ENTITY_NAME, str(rating_id)),
    )

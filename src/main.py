"""
FastAPI application: game ratings REST API.
Run with `python -m src.main` or `uvicorn src.main:app`.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api import headers
from src.api.models import FailureResponse
from src.api.routes import router as game_ratings_router
from src.core.config import API_PREFIX, HOST, LOG_LEVEL, PORT
from src.core.exceptions import InvalidRequestError, RepositoryError
from src.db.database import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> JSONResponse:
    """Caller broke the contract: 400 with a failure alert."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    body = FailureResponse(
        entity_name=exc.entity_name, error_key=exc.error_key, message=exc.message
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
        headers=headers.create_failure_alert(exc.entity_name, exc.error_key),
    )


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """The store failed: generic 500, details only in the log."""
    logger.error(
        "Store failure on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
        headers=headers.create_failure_alert("gameRating", "internal"),
    )


def create_app() -> FastAPI:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app = FastAPI(title="Game Ratings API", lifespan=lifespan)
    app.include_router(game_ratings_router, prefix=API_PREFIX)
    app.add_exception_handler(InvalidRequestError, invalid_request_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("src.main:app", host=HOST, port=PORT)

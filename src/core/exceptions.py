"""Exceptions shared by all layers. Converted to HTTP responses in src/main.py"""


class GameRatingError(Exception):
    """Base class for errors raised by this application."""


class InvalidRequestError(GameRatingError):
    """The caller broke the contract of the request (e.g. supplied an ID for a new rating)."""

    def __init__(
        self, message: str, entity_name: str = "gameRating", error_key: str = "invalid"
    ) -> None:
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key


class RepositoryError(GameRatingError):
    """The persistence layer failed to fulfil a request."""

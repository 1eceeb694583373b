"""
Custom exceptions and error handling for the movie catalog API.

Defines application-specific exceptions with error codes so the Lambda handler
can map failures to HTTP responses without leaking internal details.

Usage:
    from catalog.errors import MovieNotFoundError, ErrorCode

    raise MovieNotFoundError("No item for id 5", code=ErrorCode.MOVIE_NOT_FOUND)
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Request errors
    INVALID_MOVIE_ID = "INVALID_MOVIE_ID"
    MOVIE_NOT_FOUND = "MOVIE_NOT_FOUND"

    # Store errors
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_MOVIE_ID: "Missing or invalid movieId",
    ErrorCode.MOVIE_NOT_FOUND: "Movie not found",
    ErrorCode.STORE_UNAVAILABLE: "The movie store is temporarily unavailable. Please try again later.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class MovieCatalogError(Exception):
    """Base exception for all movie catalog errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.user_message}


class InvalidRequestError(MovieCatalogError):
    """Path or query parameters could not be parsed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_MOVIE_ID):
        super().__init__(message, code=code)


class MovieNotFoundError(MovieCatalogError):
    """No movie record exists for the requested id."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.MOVIE_NOT_FOUND):
        super().__init__(message, code=code)


class StoreError(MovieCatalogError):
    """A DynamoDB call failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORE_UNAVAILABLE):
        super().__init__(message, code=code)


def error_payload(exc: Exception) -> dict[str, Any]:
    """Serialize any exception into a client-safe error object."""
    if isinstance(exc, MovieCatalogError):
        return exc.to_dict()
    return {"code": ErrorCode.INTERNAL_ERROR.value, "message": USER_MESSAGES[ErrorCode.INTERNAL_ERROR]}

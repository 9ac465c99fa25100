"""Errors raised by the movies library."""
from .config import INVALID_MOVIE_MESSAGE


class MovieLibraryError(Exception):
    """Base exception for movies library operations."""
    pass


class ValidationError(MovieLibraryError):
    """Movie failed the required-field checks.

    The message is always ``INVALID_MOVIE_MESSAGE``; the offending fields
    are available on ``errors`` for diagnostics.
    """

    def __init__(self, errors: list[str] | None = None):
        super().__init__(INVALID_MOVIE_MESSAGE)
        self.errors = list(errors or [])


class ArgumentError(MovieLibraryError, ValueError):
    """Required argument is missing or blank."""

    def __init__(self, param_name: str, message: str | None = None):
        super().__init__(message or f"Argument '{param_name}' must not be null or empty.")
        self.param_name = param_name


class NotFoundError(MovieLibraryError, LookupError):
    """Operation needs an existing movie and none matched."""
    pass

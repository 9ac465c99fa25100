"""Application controllers - validation and routing to repositories."""

from .movies_library_controller import MoviesLibraryController

__all__ = [
    "MoviesLibraryController",
]

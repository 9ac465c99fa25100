"""Application layer - validation and routing.

Controllers validate input and delegate to repositories. They are
independent of HTTP/FastAPI and can be tested in isolation.
"""

from .controllers.movies_library_controller import MoviesLibraryController

__all__ = [
    "MoviesLibraryController",
]

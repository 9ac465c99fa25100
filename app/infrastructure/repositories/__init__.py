# Repository Pattern Implementation
"""
Repositories abstract database operations.
Each entity has its own repository.

Usage:
    conn = await get_async_db()
    repo = AsyncMovieRepository(conn)
    movies = await repo.get_all()
"""
from .base import AsyncRepository, AsyncConnectionProtocol
from .movie_repository import AsyncMovieRepository

__all__ = [
    "AsyncRepository",
    "AsyncConnectionProtocol",
    "AsyncMovieRepository",
]

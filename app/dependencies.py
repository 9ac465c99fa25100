"""Shared FastAPI dependencies."""
from typing import AsyncIterator

from .application.controllers import MoviesLibraryController
from .infrastructure.database import get_async_db, release_async_db
from .infrastructure.repositories import AsyncMovieRepository


async def get_movies_controller() -> AsyncIterator[MoviesLibraryController]:
    """Controller bound to a pooled connection for the duration of a request."""
    conn = await get_async_db()
    try:
        yield MoviesLibraryController(AsyncMovieRepository(conn))
    finally:
        await release_async_db(conn)

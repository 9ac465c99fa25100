"""Test configuration and fixtures for Movies Library.

This module provides isolated test environments:
- Temporary database (SQLite) per test
- Repository and controller bound to that database
- HTTP client whose app points at that database
"""
import os
import sys
from pathlib import Path
from typing import AsyncGenerator, Dict, Generator

import pytest
import pytest_asyncio
import aiosqlite
from fastapi.testclient import TestClient

# Ensure app is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment BEFORE importing app modules.
# app.config reads these once at import, so they stay set for the whole session.
os.environ["MOVIES_BASE_URL"] = ""
os.environ["MOVIES_LOG_LEVEL"] = "DEBUG"

from app.application.controllers import MoviesLibraryController
from app.infrastructure.database import connect, create_schema
from app.infrastructure.repositories import AsyncMovieRepository
from app.models import Movie
from tests.factories import make_movie, make_second_movie


# ============================================================================
# Sample records
# ============================================================================

@pytest.fixture
def movie() -> Movie:
    return make_movie()


@pytest.fixture
def second_movie() -> Movie:
    return make_second_movie()


# ============================================================================
# Database fixtures
# ============================================================================

@pytest.fixture(scope="function")
def db_path(tmp_path: Path) -> Path:
    """Path of a fresh database file for a single test."""
    return tmp_path / "test_movies.db"


@pytest_asyncio.fixture
async def async_db(db_path: Path) -> AsyncGenerator[aiosqlite.Connection, None]:
    """Connection to a fresh database with the movies schema."""
    conn = await connect(db_path)
    await create_schema(conn)

    yield conn

    # Cleanup
    await conn.close()


@pytest_asyncio.fixture
async def movie_repo(async_db: aiosqlite.Connection) -> AsyncMovieRepository:
    """Create AsyncMovieRepository instance."""
    return AsyncMovieRepository(async_db)


@pytest_asyncio.fixture
async def controller(movie_repo: AsyncMovieRepository) -> MoviesLibraryController:
    """Create MoviesLibraryController over the test repository."""
    return MoviesLibraryController(movie_repo)


# ============================================================================
# Application fixtures
# ============================================================================

@pytest.fixture(scope="function")
def patched_config(db_path: Path) -> Generator[Dict, None, None]:
    """Monkey-patch app configuration to use the isolated database."""
    import app.config as config
    import app.infrastructure.database.connection as connection

    # Store original values
    originals = {"DATABASE_PATH": config.DATABASE_PATH}

    # Apply patches
    config.DATABASE_PATH = db_path
    connection._pool = None

    yield {"db_path": db_path}

    # Restore original values
    config.DATABASE_PATH = originals["DATABASE_PATH"]
    connection._pool = None


@pytest.fixture(scope="function")
def client(patched_config: Dict) -> Generator[TestClient, None, None]:
    """Create test client with fresh isolated database.

    Usage:
        def test_something(client):
            response = client.get("/api/movies")
            assert response.status_code == 200
    """
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def movie_payload() -> Dict:
    """JSON body of a valid movie."""
    return {
        "title": "Test Movie",
        "director": "Test Director",
        "year_released": 2022,
        "genre": "Action",
        "duration": 120,
        "rating": 7.5,
    }

"""Async database connection management.

Provides async database connectivity using aiosqlite.
"""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import aiosqlite

from ... import config

logger = logging.getLogger(__name__)

# Global connection pool reference
_pool: Optional['AsyncConnectionPool'] = None


class AsyncConnectionPool:
    """Simple async connection pool for aiosqlite.

    aiosqlite connections can be shared across coroutines, the pool only
    bounds how many are open at once and reuses released ones.
    """

    def __init__(self, db_path: Path, max_connections: int = 10):
        self.db_path = db_path
        self.max_connections = max_connections
        self._connections: list[aiosqlite.Connection] = []
        self._semaphore = asyncio.Semaphore(max_connections)
        self._lock = asyncio.Lock()

    async def acquire(self) -> aiosqlite.Connection:
        """Acquire a connection from the pool.

        Waits while ``max_connections`` connections are checked out.
        """
        await self._semaphore.acquire()
        try:
            async with self._lock:
                # Return existing connection if available
                if self._connections:
                    return self._connections.pop()

            return await connect(self.db_path)
        except BaseException:
            self._semaphore.release()
            raise

    async def release(self, conn: aiosqlite.Connection) -> None:
        """Release a connection back to the pool."""
        try:
            async with self._lock:
                if len(self._connections) < self.max_connections:
                    self._connections.append(conn)
                    return
            await conn.close()
        finally:
            self._semaphore.release()

    async def close_all(self) -> None:
        """Close all idle connections in the pool."""
        async with self._lock:
            for conn in self._connections:
                await conn.close()
            self._connections.clear()


async def connect(db_path: Path) -> aiosqlite.Connection:
    """Open a connection with dict-like rows."""
    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    return conn


async def create_schema(conn: aiosqlite.Connection) -> None:
    """Create the movies table on the given connection."""
    # seq keeps insertion order, id is the stable update target
    await conn.execute("""
        CREATE TABLE IF NOT EXISTS movies (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            id TEXT NOT NULL UNIQUE,
            title TEXT,
            director TEXT,
            year_released INTEGER,
            genre TEXT,
            duration INTEGER,
            rating REAL
        )
    """)
    await conn.execute(
        "CREATE INDEX IF NOT EXISTS idx_movies_title ON movies(title)"
    )
    await conn.commit()


async def get_async_db() -> aiosqlite.Connection:
    """Get async database connection.

    Returns:
        Async database connection
    """
    global _pool
    if _pool is None:
        _pool = AsyncConnectionPool(config.DATABASE_PATH, config.DB_MAX_CONNECTIONS)
    return await _pool.acquire()


async def release_async_db(conn: aiosqlite.Connection) -> None:
    """Release async database connection back to pool.

    Args:
        conn: Connection to release
    """
    if _pool:
        await _pool.release(conn)
    else:
        await conn.close()


async def init_async_db() -> None:
    """Initialize database schema using async connection."""
    conn = await get_async_db()
    try:
        await create_schema(conn)
        logger.info("Movies database ready at %s", config.DATABASE_PATH)
    finally:
        await release_async_db(conn)


async def clear_async_db() -> int:
    """Delete every movie. Returns the number of removed records."""
    conn = await get_async_db()
    try:
        cursor = await conn.execute("DELETE FROM movies")
        await conn.commit()
        logger.info("Cleared %d movies", cursor.rowcount)
        return cursor.rowcount
    finally:
        await release_async_db(conn)


async def close_async_db() -> None:
    """Close all async database connections."""
    global _pool
    if _pool:
        await _pool.close_all()
        _pool = None

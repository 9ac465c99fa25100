"""Base repository protocol and utilities."""
from typing import Protocol

import aiosqlite


class AsyncConnectionProtocol(Protocol):
    """Protocol for async database connection."""

    async def execute(self, sql: str, parameters: tuple = ...) -> aiosqlite.Cursor: ...
    async def executemany(self, sql: str, parameters: list[tuple]) -> aiosqlite.Cursor: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...


class AsyncRepository:
    """Async base repository class.

    Wraps a single aiosqlite connection. Subclasses issue SQL through the
    helpers below and commit after every write. A batch insert is a
    single unit: it commits once or rolls back.

    Example:
        class AsyncMovieRepository(AsyncRepository):
            async def count(self) -> int:
                row = await self._fetchone("SELECT COUNT(*) AS n FROM movies")
                return row["n"]
    """

    def __init__(self, connection: AsyncConnectionProtocol):
        """Initialize repository with async database connection.

        Args:
            connection: Async database connection (aiosqlite.Connection)
        """
        self._conn = connection

    async def _execute(self, sql: str, parameters: tuple = ()) -> aiosqlite.Cursor:
        """Execute a parameterized statement."""
        return await self._conn.execute(sql, parameters)

    async def _execute_many(self, sql: str, parameters_list: list[tuple]) -> aiosqlite.Cursor:
        """Execute a statement once per parameter tuple."""
        return await self._conn.executemany(sql, parameters_list)

    async def _commit(self) -> None:
        await self._conn.commit()

    async def _rollback(self) -> None:
        await self._conn.rollback()

    async def _fetchone(self, sql: str, parameters: tuple = ()) -> dict | None:
        """Fetch the first row as a dict, or None when nothing matched."""
        cursor = await self._execute(sql, parameters)
        row = await cursor.fetchone()
        return dict(row) if row else None

    async def _fetchall(self, sql: str, parameters: tuple = ()) -> list[dict]:
        """Fetch every row as a list of dicts."""
        cursor = await self._execute(sql, parameters)
        rows = await cursor.fetchall()
        return [dict(row) for row in rows]

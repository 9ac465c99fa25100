"""Movie repository - direct access to the movie collection.

No validation happens here; MoviesLibraryController owns the checks.
"""
import logging
import uuid
from typing import Iterable

from ...models import Movie
from .base import AsyncRepository

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, director, year_released, genre, duration, rating"

# First stored record with an exact title; titles are not unique
_FIRST_WITH_TITLE = "SELECT seq FROM movies WHERE title = ? ORDER BY seq LIMIT 1"


class AsyncMovieRepository(AsyncRepository):
    """Async repository for movie records.

    Examples:
        >>> repo = AsyncMovieRepository(conn)
        >>> movie_id = await repo.insert(Movie(title="Heat", ...))
        >>> movie = await repo.get_by_title("Heat")
    """

    async def insert(self, movie: Movie) -> str:
        """Store a new movie.

        Assigns ``movie.id`` when the caller left it empty.

        Returns:
            The movie id
        """
        self._assign_id(movie)
        await self._execute(
            f"INSERT INTO movies ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
            self._values(movie)
        )
        await self._commit()
        logger.debug("Inserted movie %s (%r)", movie.id, movie.title)
        return movie.id

    async def insert_many(self, movies: Iterable[Movie]) -> list[str]:
        """Store several movies in one commit.

        Either every movie is stored or, when any row fails, none is.

        Returns:
            Movie ids in input order
        """
        movies = list(movies)
        if not movies:
            return []

        for movie in movies:
            self._assign_id(movie)
        try:
            await self._execute_many(
                f"INSERT INTO movies ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                [self._values(movie) for movie in movies]
            )
            await self._commit()
        except Exception:
            await self._rollback()
            raise
        logger.debug("Inserted %d movies", len(movies))
        return [movie.id for movie in movies]

    async def update(self, movie: Movie) -> bool:
        """Replace every field of a stored movie.

        The target is the record with ``movie.id``; a movie without an id
        targets the first record with the same title.

        Returns:
            True if a record was replaced
        """
        assignments = (
            "title = ?, director = ?, year_released = ?, genre = ?, "
            "duration = ?, rating = ?"
        )
        fields = (
            movie.title, movie.director, movie.year_released,
            movie.genre, movie.duration, movie.rating,
        )
        if movie.id:
            cursor = await self._execute(
                f"UPDATE movies SET {assignments} WHERE id = ?",
                fields + (movie.id,)
            )
        else:
            cursor = await self._execute(
                f"UPDATE movies SET {assignments} WHERE seq = ({_FIRST_WITH_TITLE})",
                fields + (movie.title,)
            )
        await self._commit()
        logger.debug("Updated movie %s (%r): %d row(s)", movie.id, movie.title, cursor.rowcount)
        return cursor.rowcount > 0

    async def delete_by_title(self, title: str) -> bool:
        """Delete the first movie with an exact title.

        Returns:
            True if a movie existed and was deleted
        """
        cursor = await self._execute(
            f"DELETE FROM movies WHERE seq = ({_FIRST_WITH_TITLE})",
            (title,)
        )
        await self._commit()
        return cursor.rowcount > 0

    async def get_all(self) -> list[Movie]:
        """List all movies in insertion order."""
        rows = await self._fetchall(f"SELECT {_COLUMNS} FROM movies ORDER BY seq")
        return [Movie.from_row(row) for row in rows]

    async def get_by_title(self, title: str) -> Movie | None:
        """Get the first movie whose title matches exactly."""
        row = await self._fetchone(
            f"SELECT {_COLUMNS} FROM movies WHERE title = ? ORDER BY seq LIMIT 1",
            (title,)
        )
        return Movie.from_row(row)

    async def get_by_id(self, movie_id: str) -> Movie | None:
        row = await self._fetchone(
            f"SELECT {_COLUMNS} FROM movies WHERE id = ?",
            (movie_id,)
        )
        return Movie.from_row(row)

    async def search_by_title_fragment(self, fragment: str) -> list[Movie]:
        """Find movies whose title contains ``fragment``.

        Matching is case-sensitive: instr() compares bytes, unlike LIKE
        which folds ASCII case.
        """
        rows = await self._fetchall(
            f"SELECT {_COLUMNS} FROM movies WHERE instr(title, ?) > 0 ORDER BY seq",
            (fragment,)
        )
        return [Movie.from_row(row) for row in rows]

    async def count(self) -> int:
        row = await self._fetchone("SELECT COUNT(*) AS total FROM movies")
        return row["total"]

    async def clear(self) -> int:
        """Delete every movie.

        Returns:
            Number of deleted movies
        """
        cursor = await self._execute("DELETE FROM movies")
        await self._commit()
        return cursor.rowcount

    # Private helper methods

    @staticmethod
    def _assign_id(movie: Movie) -> None:
        if not movie.id:
            movie.id = uuid.uuid4().hex

    @staticmethod
    def _values(movie: Movie) -> tuple:
        return (
            movie.id, movie.title, movie.director, movie.year_released,
            movie.genre, movie.duration, movie.rating,
        )

"""Movies library controller - validated access to the movie collection.

Every write goes through the validation gate first; lookups that need an
existing movie raise NotFoundError, plain title lookup returns None.
"""
import logging
from typing import List, Optional

from pydantic import ValidationError as SchemaValidationError

from ...errors import ArgumentError, NotFoundError, ValidationError
from ...infrastructure.repositories import AsyncMovieRepository
from ...models import Movie, MovieSchema

logger = logging.getLogger(__name__)


class MoviesLibraryController:
    """Controller for the movie collection.

    Responsibilities:
    - Reject invalid movies before add/update
    - Reject blank title arguments before delete/search
    - Turn empty results into NotFoundError where a match is required

    Nothing is retried or suppressed; errors reach the caller unchanged.
    """

    def __init__(self, movie_repository: AsyncMovieRepository):
        self.movie_repo = movie_repository

    # ========================================================================
    # Writes
    # ========================================================================

    async def add(self, movie: Movie) -> None:
        """Add a movie.

        Raises:
            ValidationError: movie is missing a required field
        """
        self._validate(movie)
        await self.movie_repo.insert(movie)
        logger.info("Added movie %r", movie.title)

    async def add_many(self, movies: List[Movie]) -> None:
        """Add several movies at once, all or none.

        Every movie is validated before storage is touched; the first
        invalid one aborts the whole batch.

        Raises:
            ValidationError: a movie is missing a required field
        """
        movies = list(movies)
        for movie in movies:
            self._validate(movie)
        await self.movie_repo.insert_many(movies)
        logger.info("Added %d movies", len(movies))

    async def update(self, movie: Movie) -> None:
        """Replace a stored movie with ``movie``.

        Validation runs before storage is touched, so an invalid movie
        raises ValidationError even when nothing would match it.

        Raises:
            ValidationError: movie is missing a required field
        """
        self._validate(movie)
        if not await self.movie_repo.update(movie):
            logger.warning("Update matched no stored movie (id=%s, title=%r)", movie.id, movie.title)

    async def delete(self, title: Optional[str]) -> None:
        """Delete the movie with an exact title.

        Raises:
            ArgumentError: title is None or blank
            NotFoundError: no movie has this title
        """
        self._require_text(title, "title")
        if not await self.movie_repo.delete_by_title(title):
            logger.info("Delete failed, no movie titled %r", title)
            raise NotFoundError(f"Movie with title '{title}' not found.")
        logger.info("Deleted movie %r", title)

    # ========================================================================
    # Reads
    # ========================================================================

    async def get_all(self) -> List[Movie]:
        return await self.movie_repo.get_all()

    async def get_by_title(self, title: Optional[str]) -> Optional[Movie]:
        """Get movie by exact title, None when absent."""
        if title is None or not title.strip():
            return None
        return await self.movie_repo.get_by_title(title)

    async def search_by_title_fragment(self, fragment: Optional[str]) -> List[Movie]:
        """Get movies whose title contains ``fragment`` (case-sensitive).

        Raises:
            ArgumentError: fragment is None or blank
            NotFoundError: no title contains the fragment
        """
        self._require_text(fragment, "fragment")
        movies = await self.movie_repo.search_by_title_fragment(fragment)
        if not movies:
            raise NotFoundError(f"No movies found with title containing '{fragment}'.")
        return movies

    # ========================================================================
    # Validation
    # ========================================================================

    def is_valid(self, movie: Movie) -> bool:
        return not self._schema_errors(movie)

    def _validate(self, movie: Movie) -> None:
        errors = self._schema_errors(movie)
        if errors:
            logger.info("Rejected movie %r, invalid fields: %s", getattr(movie, "title", None), ", ".join(errors))
            raise ValidationError(errors)

    @staticmethod
    def _schema_errors(movie: Movie) -> list[str]:
        """Names of the fields that break the movie rules."""
        try:
            MovieSchema.model_validate(movie)
        except SchemaValidationError as e:
            # Empty loc means the object itself is unusable (e.g. None)
            return sorted({str(error["loc"][0]) if error["loc"] else "movie" for error in e.errors()})
        return []

    @staticmethod
    def _require_text(value: Optional[str], name: str) -> None:
        if value is None or not str(value).strip():
            raise ArgumentError(name)

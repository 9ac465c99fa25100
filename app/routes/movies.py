"""Movie library routes."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..application.controllers import MoviesLibraryController
from ..dependencies import get_movies_controller
from ..models import Movie

router = APIRouter(prefix="/api/movies", tags=["movies"])


# Every field is optional so the controller, not FastAPI, decides validity;
# values of the wrong type are mapped to the same 400 in main.py
class MovieBody(BaseModel):
    title: str | None = None
    director: str | None = None
    year_released: int | None = None
    genre: str | None = None
    duration: int | None = None
    rating: float | None = None

    def to_movie(self, movie_id: str | None = None) -> Movie:
        return Movie(id=movie_id, **self.model_dump())


@router.get("")
async def list_movies(controller: MoviesLibraryController = Depends(get_movies_controller)):
    """Get every movie."""
    movies = await controller.get_all()
    return [movie.to_dict() for movie in movies]


@router.get("/search")
async def search_movies(
    fragment: str | None = None,
    controller: MoviesLibraryController = Depends(get_movies_controller)
):
    """Get movies whose title contains the fragment. 404 when none do."""
    movies = await controller.search_by_title_fragment(fragment)
    return [movie.to_dict() for movie in movies]


@router.get("/lookup")
async def lookup_movie(
    title: str | None = None,
    controller: MoviesLibraryController = Depends(get_movies_controller)
):
    """Get movie by exact title, null when absent."""
    movie = await controller.get_by_title(title)
    return movie.to_dict() if movie else None


@router.post("", status_code=201)
async def create_movie(
    data: MovieBody,
    controller: MoviesLibraryController = Depends(get_movies_controller)
):
    movie = data.to_movie()
    await controller.add(movie)
    return movie.to_dict()


@router.put("/{movie_id}")
async def update_movie(
    movie_id: str,
    data: MovieBody,
    controller: MoviesLibraryController = Depends(get_movies_controller)
):
    """Replace a movie, renaming included."""
    movie = data.to_movie(movie_id)
    await controller.update(movie)
    return movie.to_dict()


@router.delete("")
async def delete_movie(
    title: str | None = None,
    controller: MoviesLibraryController = Depends(get_movies_controller)
):
    """Delete movie by exact title."""
    await controller.delete(title)
    return {"status": "ok"}

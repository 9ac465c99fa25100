#!/usr/bin/env python3
"""
Movie collection management CLI for Movies Library.

Usage:
    python manage_movies.py seed <json_file>      - validate and add movies from a JSON list
    python manage_movies.py list                  - list all movies
    python manage_movies.py search <fragment>     - list movies whose title contains fragment
    python manage_movies.py delete <title>        - delete movie by exact title
    python manage_movies.py clear                 - delete every movie

The database file is taken from MOVIES_DATABASE_PATH.
"""

import asyncio
import json
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from pathlib import Path

from app.application.controllers import MoviesLibraryController
from app.errors import MovieLibraryError, ValidationError
from app.infrastructure.database import (
    init_async_db, get_async_db, release_async_db, clear_async_db, close_async_db,
)
from app.infrastructure.repositories import AsyncMovieRepository
from app.models import Movie


def print_usage():
    print(__doc__)


def format_movie(movie: Movie) -> str:
    return (
        f"{movie.title} ({movie.year_released}) - {movie.director}, "
        f"{movie.genre}, {movie.duration} min, rated {movie.rating}"
    )


async def cmd_seed(controller: MoviesLibraryController, args):
    if len(args) < 1:
        print("Error: seed requires <json_file>")
        print("Example: python manage_movies.py seed movies.json")
        return 1

    path = Path(args[0])
    if not path.exists():
        print(f"Error: File '{path}' not found")
        return 1

    try:
        records = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        print(f"Error: '{path}' is not valid JSON: {e}")
        return 1
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        print("Error: Seed file must contain a JSON list of movie objects")
        return 1

    # Ids are always assigned on insert
    movies = [Movie.from_row({k: v for k, v in record.items() if k != "id"}) for record in records]

    # Name the offending record; add_many would only say the batch failed
    for position, movie in enumerate(movies, start=1):
        if not controller.is_valid(movie):
            print(f"Error: Record {position} ({movie.title!r}): {ValidationError()}")
            return 1

    # One transaction, so a storage failure leaves nothing behind
    await controller.add_many(movies)
    print(f"Added {len(movies)} movie(s)")
    return 0


async def cmd_list(controller: MoviesLibraryController, args):
    movies = await controller.get_all()
    if not movies:
        print("No movies found")
        return 0

    print(f"{'Title':<40} {'Year':<6} {'Rating':<6}")
    print("-" * 54)
    for movie in movies:
        print(f"{movie.title!s:<40} {movie.year_released!s:<6} {movie.rating!s:<6}")
    print(f"\nTotal: {len(movies)} movie(s)")
    return 0


async def cmd_search(controller: MoviesLibraryController, args):
    if len(args) < 1:
        print("Error: search requires <fragment>")
        return 1

    for movie in await controller.search_by_title_fragment(args[0]):
        print(format_movie(movie))
    return 0


async def cmd_delete(controller: MoviesLibraryController, args):
    if len(args) < 1:
        print("Error: delete requires <title>")
        return 1

    title = args[0]
    await controller.delete(title)
    print(f"Movie '{title}' deleted")
    return 0


async def cmd_clear(controller: MoviesLibraryController, args):
    removed = await clear_async_db()
    print(f"Deleted {removed} movie(s)")
    return 0


COMMANDS = {
    'seed': cmd_seed,
    'list': cmd_list,
    'search': cmd_search,
    'delete': cmd_delete,
    'clear': cmd_clear,
}


async def run(argv: list[str]) -> int:
    if len(argv) < 1:
        print_usage()
        return 1

    command = argv[0].lower()
    args = argv[1:]

    if command == 'help':
        print_usage()
        return 0

    if command not in COMMANDS:
        print(f"Unknown command: {command}")
        print_usage()
        return 1

    # Initialize database
    await init_async_db()
    conn = await get_async_db()
    try:
        controller = MoviesLibraryController(AsyncMovieRepository(conn))
        return await COMMANDS[command](controller, args)
    except MovieLibraryError as e:
        print(f"Error: {e}")
        return 1
    finally:
        await release_async_db(conn)
        await close_async_db()


def main():
    return asyncio.run(run(sys.argv[1:]))


if __name__ == "__main__":
    sys.exit(main())

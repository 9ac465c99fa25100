"""Application configuration and constants."""
import os
from pathlib import Path

# Directory paths
BASE_DIR = Path(__file__).resolve().parent.parent

# Database configuration
# Set via environment variable MOVIES_DATABASE_PATH, e.g., "/var/lib/movies/movies.db"
DATABASE_PATH = Path(os.environ.get("MOVIES_DATABASE_PATH", str(BASE_DIR / "movies.db")))
DB_MAX_CONNECTIONS = int(os.environ.get("MOVIES_DB_MAX_CONNECTIONS", "10"))

# Base URL configuration (for running under a subpath like /movies)
BASE_URL = os.environ.get("MOVIES_BASE_URL", "").strip("/")
ROOT_PATH = f"/{BASE_URL}" if BASE_URL else ""

# Logging
LOG_LEVEL = os.environ.get("MOVIES_LOG_LEVEL", "INFO").upper()

# Movie validation rules
TITLE_MAX_LENGTH = 255
DIRECTOR_MAX_LENGTH = 255
GENRE_MAX_LENGTH = 100
MIN_YEAR_RELEASED = 1888  # Roundhay Garden Scene
MAX_YEARS_AHEAD = 10  # announced releases may be dated a few years out
MIN_DURATION = 1  # minutes
MAX_DURATION = 60 * 24 * 60  # sixty days, well inside SQLite INTEGER range
MIN_RATING = 0.0
MAX_RATING = 10.0

# Returned verbatim to callers, keep stable
INVALID_MOVIE_MESSAGE = "Movie is not valid."

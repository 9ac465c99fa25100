"""Movie record and its validation schema."""
from dataclasses import dataclass, asdict, fields
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import (
    TITLE_MAX_LENGTH, DIRECTOR_MAX_LENGTH, GENRE_MAX_LENGTH,
    MIN_YEAR_RELEASED, MAX_YEARS_AHEAD, MIN_DURATION, MAX_DURATION, MIN_RATING, MAX_RATING,
)


@dataclass
class Movie:
    """A single movie record.

    Every field defaults to None so partially filled records can be built;
    whether a record is acceptable is decided by MovieSchema, not here.
    ``id`` is assigned by the repository on insert.
    """
    title: Optional[str] = None
    director: Optional[str] = None
    year_released: Optional[int] = None
    genre: Optional[str] = None
    duration: Optional[int] = None
    rating: Optional[float] = None
    id: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_row(cls, row: dict | None) -> Optional["Movie"]:
        """Build a Movie from a database row dict, or None for a missing row."""
        if row is None:
            return None
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in row.items() if key in names})


class MovieSchema(BaseModel):
    """Field rules for a valid movie, checked before every write.

    Surrounding whitespace is ignored when checking for blank text fields;
    the stored record keeps the caller's values untouched.
    """
    model_config = ConfigDict(str_strip_whitespace=True, from_attributes=True)

    id: str | None = None
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    director: str = Field(min_length=1, max_length=DIRECTOR_MAX_LENGTH)
    year_released: int
    genre: str = Field(min_length=1, max_length=GENRE_MAX_LENGTH)
    duration: int = Field(ge=MIN_DURATION, le=MAX_DURATION)
    rating: float = Field(ge=MIN_RATING, le=MAX_RATING, allow_inf_nan=False)

    @field_validator("year_released")
    @classmethod
    def _plausible_year(cls, value: int) -> int:
        latest = date.today().year + MAX_YEARS_AHEAD
        if not MIN_YEAR_RELEASED <= value <= latest:
            raise ValueError(f"year_released must be between {MIN_YEAR_RELEASED} and {latest}")
        return value

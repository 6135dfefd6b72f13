"""Request/response schemas for movies and directors."""

from typing import Annotated

from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field

# Range of the INTEGER columns; values outside it are rejected before any query.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

RowId = Annotated[int, Field(ge=1, le=INT4_MAX)]
Year = Annotated[int, Field(ge=INT4_MIN, le=INT4_MAX)]
PathId = Annotated[int, Path(ge=1, le=INT4_MAX)]


class MovieCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    director_id: RowId
    year: Year


class MovieUpdate(BaseModel):
    """Full replacement of a movie; director_id null clears the director."""

    title: str = Field(..., min_length=1, max_length=255)
    director_id: RowId | None = None
    year: Year


class MovieOut(BaseModel):
    """Movie row with the director's name joined in (null when unset)."""

    id: int
    title: str
    year: int
    director_id: int | None = None
    director_name: str | None = None


class DirectorIn(BaseModel):
    """Body for creating or replacing a director."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    birth_year: Year = Field(..., alias="birthYear")


class DirectorOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    birth_year: int = Field(..., alias="birthYear")

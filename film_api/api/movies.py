"""Movies CRUD. Reads are public, create needs a token, update/delete need admin."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from film_api.api.deps import AdminIdentity, CurrentIdentity, get_movie_repository
from film_api.repositories import MovieRepository, UnknownDirectorError
from film_api.schemas.catalog import MovieCreate, MovieOut, MovieUpdate, PathId

logger = logging.getLogger(__name__)

router = APIRouter()

Movies = Annotated[MovieRepository, Depends(get_movie_repository)]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")


def _unknown_director(e: UnknownDirectorError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Director {e.director_id} does not exist",
    )


@router.get("", response_model=list[MovieOut])
def list_movies(movies: Movies) -> list[MovieOut]:
    """All movies ordered by id, with director name joined in."""
    return [MovieOut(**row) for row in movies.list_all()]


@router.get("/{movie_id}", response_model=MovieOut)
def get_movie(movie_id: PathId, movies: Movies) -> MovieOut:
    row = movies.get_by_id(movie_id)
    if row is None:
        raise _not_found()
    return MovieOut(**row)


@router.post("", response_model=MovieOut, status_code=status.HTTP_201_CREATED)
def create_movie(body: MovieCreate, identity: CurrentIdentity, movies: Movies) -> MovieOut:
    try:
        row = movies.create(body.title, body.director_id, body.year)
    except UnknownDirectorError as e:
        raise _unknown_director(e) from e
    logger.info(
        "Movie created", extra={"movie_id": row["id"], "username": identity.username}
    )
    return MovieOut(**row)


@router.put("/{movie_id}", response_model=MovieOut)
def update_movie(
    movie_id: PathId, body: MovieUpdate, identity: AdminIdentity, movies: Movies
) -> MovieOut:
    try:
        row = movies.update(movie_id, body.title, body.director_id, body.year)
    except UnknownDirectorError as e:
        raise _unknown_director(e) from e
    if row is None:
        raise _not_found()
    logger.info("Movie updated", extra={"movie_id": movie_id, "username": identity.username})
    return MovieOut(**row)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(movie_id: PathId, identity: AdminIdentity, movies: Movies) -> Response:
    if not movies.delete(movie_id):
        raise _not_found()
    logger.info("Movie deleted", extra={"movie_id": movie_id, "username": identity.username})
    return Response(status_code=status.HTTP_204_NO_CONTENT)

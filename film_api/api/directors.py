"""Directors CRUD, guarded the same way as movies."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from film_api.api.deps import AdminIdentity, CurrentIdentity, get_director_repository
from film_api.repositories import DirectorRepository
from film_api.schemas.catalog import DirectorIn, DirectorOut, PathId

logger = logging.getLogger(__name__)

router = APIRouter()

Directors = Annotated[DirectorRepository, Depends(get_director_repository)]


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Director not found")


@router.get("", response_model=list[DirectorOut])
def list_directors(directors: Directors) -> list[DirectorOut]:
    return [DirectorOut.model_validate(row) for row in directors.list_all()]


@router.get("/{director_id}", response_model=DirectorOut)
def get_director(director_id: PathId, directors: Directors) -> DirectorOut:
    row = directors.get_by_id(director_id)
    if row is None:
        raise _not_found()
    return DirectorOut.model_validate(row)


@router.post("", response_model=DirectorOut, status_code=status.HTTP_201_CREATED)
def create_director(
    body: DirectorIn, identity: CurrentIdentity, directors: Directors
) -> DirectorOut:
    row = directors.create(body.name, body.birth_year)
    logger.info(
        "Director created", extra={"director_id": row["id"], "username": identity.username}
    )
    return DirectorOut.model_validate(row)


@router.put("/{director_id}", response_model=DirectorOut)
def update_director(
    director_id: PathId, body: DirectorIn, identity: AdminIdentity, directors: Directors
) -> DirectorOut:
    row = directors.update(director_id, body.name, body.birth_year)
    if row is None:
        raise _not_found()
    logger.info(
        "Director updated", extra={"director_id": director_id, "username": identity.username}
    )
    return DirectorOut.model_validate(row)


@router.delete("/{director_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_director(director_id: PathId, identity: AdminIdentity, directors: Directors) -> Response:
    """Delete a director; its movies remain with director_id set to null."""
    if not directors.delete(director_id):
        raise _not_found()
    logger.info(
        "Director deleted", extra={"director_id": director_id, "username": identity.username}
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

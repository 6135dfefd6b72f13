"""Auth guards (get_current_identity, require_role) and repository dependencies."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from film_api.core.database import get_db
from film_api.core.security import AuthError, AuthErrorKind, TokenService
from film_api.repositories import DirectorRepository, MovieRepository, UserRepository
from film_api.schemas.auth import Identity, Role

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

_AUTH_ERROR_DETAIL = {
    AuthErrorKind.MISSING_TOKEN: "Missing bearer token",
    AuthErrorKind.INVALID: "Invalid token",
    AuthErrorKind.EXPIRED: "Token has expired",
}


def _unauthorized(kind: AuthErrorKind) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=_AUTH_ERROR_DETAIL[kind],
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> Identity:
    """Dependency: require a valid Bearer JWT and return the caller's identity. Raises 401 otherwise."""
    if credentials is None:
        raise _unauthorized(AuthErrorKind.MISSING_TOKEN)
    try:
        return tokens.verify(credentials.credentials)
    except AuthError as e:
        logger.info("Rejected bearer token: %s", e.kind.value)
        raise _unauthorized(e.kind) from e


def require_role(role: Role) -> Callable[[Identity], Identity]:
    """Build a dependency that requires an authenticated identity with the given role (403 otherwise)."""

    def dependency(
        identity: Annotated[Identity, Depends(get_current_identity)],
    ) -> Identity:
        if identity.role != role:
            logger.info(
                "Role check failed",
                extra={"user_id": identity.id, "role": identity.role.value, "required": role.value},
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Requires role '{role.value}'",
            )
        return identity

    return dependency


require_admin = require_role(Role.ADMIN)

CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
AdminIdentity = Annotated[Identity, Depends(require_admin)]


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> UserRepository:
    return UserRepository(db)


def get_movie_repository(db: Annotated[Session, Depends(get_db)]) -> MovieRepository:
    return MovieRepository(db)


def get_director_repository(db: Annotated[Session, Depends(get_db)]) -> DirectorRepository:
    return DirectorRepository(db)

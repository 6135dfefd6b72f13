"""Registration and login endpoints issuing bearer tokens."""

import logging
import secrets
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from film_api.api.deps import get_token_service, get_user_repository
from film_api.core.security import TokenService, hash_password, verify_password
from film_api.repositories import DuplicateUsernameError, UserRepository
from film_api.schemas.auth import (
    Identity,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    Role,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Invalid username or password."
_UNKNOWN_USER_HASH = hash_password(secrets.token_urlsafe(16))


def _register(body: RegisterRequest, users: UserRepository, role: Role) -> RegisterResponse:
    try:
        user = users.create(body.username, hash_password(body.password), role)
    except DuplicateUsernameError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already taken.",
        ) from e
    logger.info("Registered user", extra={"user_id": user.id, "role": role.value})
    return RegisterResponse(id=user.id, username=user.username)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> RegisterResponse:
    """Create a regular user account. Usernames are case-insensitive."""
    return _register(body, users, Role.USER)


@router.post(
    "/register-admin", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
def register_admin(
    body: RegisterRequest,
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> RegisterResponse:
    """Create an admin account."""
    return _register(body, users, Role.ADMIN)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    users: Annotated[UserRepository, Depends(get_user_repository)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> LoginResponse:
    """
    Authenticate with username and password; returns a JWT valid for one hour.
    Include the token in the Authorization header as: Bearer <token>
    Unknown user and wrong password produce the same 401.
    """
    user = users.get_by_username(body.username)
    # Unknown users still pay for a bcrypt check so timing does not reveal them.
    stored_hash = user.password if user is not None else _UNKNOWN_USER_HASH
    if not verify_password(body.password, stored_hash) or user is None:
        logger.info("Login failed")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )
    token = tokens.issue(Identity(id=user.id, username=user.username, role=user.role))
    logger.info("Login succeeded", extra={"user_id": user.id})
    return LoginResponse(message="Login successful", token=token)

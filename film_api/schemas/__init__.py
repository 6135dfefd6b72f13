"""Pydantic request/response schemas."""

from film_api.schemas.auth import (
    Identity,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    Role,
)
from film_api.schemas.catalog import DirectorIn, DirectorOut, MovieCreate, MovieOut, MovieUpdate
from film_api.schemas.health import ErrorResponse, HealthResponse, StatusResponse

__all__ = [
    "DirectorIn",
    "DirectorOut",
    "ErrorResponse",
    "HealthResponse",
    "Identity",
    "LoginRequest",
    "LoginResponse",
    "MovieCreate",
    "MovieOut",
    "MovieUpdate",
    "RegisterRequest",
    "RegisterResponse",
    "Role",
    "StatusResponse",
]

"""Request/response schemas for auth endpoints."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Closed set of permission tiers."""

    USER = "user"
    ADMIN = "admin"


class Identity(BaseModel):
    """Authenticated caller (id, username, role) decoded from a bearer token."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    role: Role


class _Credentials(BaseModel):
    """Username is stripped and lowercased before length checks."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")

    @field_validator("username", mode="before")
    @classmethod
    def normalize_username(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


class RegisterRequest(_Credentials):
    """Credentials for registration; password must be at least 6 characters."""

    password: str = Field(..., min_length=6, max_length=128, description="Password")


class LoginRequest(_Credentials):
    """Credentials for login."""

    password: str = Field(..., min_length=1, max_length=128, description="Password")


class RegisterResponse(BaseModel):
    """Created account (no password, no role)."""

    id: int
    username: str


class LoginResponse(BaseModel):
    """Bearer token returned after successful login."""

    message: str = Field(default="Login successful")
    token: str = Field(..., description="JWT access token")

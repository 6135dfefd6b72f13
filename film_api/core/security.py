"""Password hashing and JWT issuance/verification for authentication."""

from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError

from film_api.core.config import Settings
from film_api.schemas.auth import Identity

# Bcrypt cost (rounds); 10 matches the common library default.
BCRYPT_ROUNDS = 10

PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128
USERNAME_MAX_LEN = 255


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Malformed hashes never match."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class AuthErrorKind(str, Enum):
    MISSING_TOKEN = "missing_token"
    INVALID = "invalid"
    EXPIRED = "expired"


class AuthError(Exception):
    """Raised when a bearer token is absent or fails verification."""

    def __init__(self, kind: AuthErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.value)


class TokenService:
    """
    Issue and verify signed access tokens.

    Built once from Settings at startup; holds no per-request state.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        if not secret:
            raise ValueError("TokenService requires a non-empty secret")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def issue(self, identity: Identity) -> str:
        """Create a JWT carrying sub (user id), username, role, iat and exp."""
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(identity.id),
            "username": identity.username,
            "role": identity.role.value,
            "iat": now,
            "exp": now + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        """
        Decode and validate a JWT; return the embedded identity.
        Raises AuthError(EXPIRED) past expiry and AuthError(INVALID) for anything else wrong.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthError(AuthErrorKind.EXPIRED) from e
        except jwt.PyJWTError as e:
            raise AuthError(AuthErrorKind.INVALID) from e

        try:
            return Identity(
                id=int(payload["sub"]),
                username=payload.get("username"),
                role=payload.get("role"),
            )
        except (TypeError, ValueError, ValidationError) as e:
            raise AuthError(AuthErrorKind.INVALID) from e

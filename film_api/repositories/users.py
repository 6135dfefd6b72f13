"""
Users repository.

Usernames are expected already lowercased by the caller; uniqueness is
enforced by the store's unique index, not checked here beforehand.
"""

from dataclasses import dataclass

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from film_api.schemas.auth import Role


class DuplicateUsernameError(Exception):
    """The username is already taken."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username already registered: {username}")


@dataclass(frozen=True)
class UserRecord:
    id: int
    username: str
    password: str
    role: Role


def _row_to_user(row) -> UserRecord:
    return UserRecord(
        id=row["id"],
        username=row["username"],
        password=row["password"],
        role=Role(row["role"]),
    )


class UserRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_by_username(self, username: str) -> UserRecord | None:
        row = (
            self.db.execute(
                text(
                    "SELECT id, username, password, role FROM users "
                    "WHERE username = :username"
                ),
                {"username": username},
            )
            .mappings()
            .first()
        )
        return _row_to_user(row) if row else None

    def create(self, username: str, password_hash: str, role: Role = Role.USER) -> UserRecord:
        """Insert a user; raises DuplicateUsernameError on unique violation."""
        try:
            row = (
                self.db.execute(
                    text(
                        "INSERT INTO users (username, password, role) "
                        "VALUES (:username, :password, :role) "
                        "RETURNING id, username, password, role"
                    ),
                    {"username": username, "password": password_hash, "role": role.value},
                )
                .mappings()
                .one()
            )
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateUsernameError(username) from e
        return _row_to_user(row)

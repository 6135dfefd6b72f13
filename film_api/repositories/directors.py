"""Directors repository."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session


class DirectorRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list_all(self) -> list[dict[str, Any]]:
        rows = self.db.execute(
            text('SELECT id, name, "birthYear" FROM directors ORDER BY id ASC')
        ).mappings()
        return [dict(r) for r in rows]

    def get_by_id(self, director_id: int) -> dict[str, Any] | None:
        row = (
            self.db.execute(
                text('SELECT id, name, "birthYear" FROM directors WHERE id = :id'),
                {"id": director_id},
            )
            .mappings()
            .first()
        )
        return dict(row) if row else None

    def create(self, name: str, birth_year: int) -> dict[str, Any]:
        row = (
            self.db.execute(
                text(
                    'INSERT INTO directors (name, "birthYear") VALUES (:name, :birth_year) '
                    'RETURNING id, name, "birthYear"'
                ),
                {"name": name, "birth_year": birth_year},
            )
            .mappings()
            .one()
        )
        self.db.commit()
        return dict(row)

    def update(self, director_id: int, name: str, birth_year: int) -> dict[str, Any] | None:
        """Replace name and birth year; None when no director has this id."""
        row = (
            self.db.execute(
                text(
                    'UPDATE directors SET name = :name, "birthYear" = :birth_year '
                    'WHERE id = :id RETURNING id, name, "birthYear"'
                ),
                {"id": director_id, "name": name, "birth_year": birth_year},
            )
            .mappings()
            .first()
        )
        self.db.commit()
        return dict(row) if row else None

    def delete(self, director_id: int) -> bool:
        """Delete a director; movies pointing at it get director_id NULL via the FK."""
        result = self.db.execute(
            text("DELETE FROM directors WHERE id = :id"), {"id": director_id}
        )
        self.db.commit()
        return result.rowcount > 0

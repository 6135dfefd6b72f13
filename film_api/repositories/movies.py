"""Movies repository. Reads join the director's name in."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session


class UnknownDirectorError(Exception):
    """director_id does not reference an existing director."""

    def __init__(self, director_id: int | None) -> None:
        self.director_id = director_id
        super().__init__(f"Director {director_id} does not exist")


class MovieRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list_all(self) -> list[dict[str, Any]]:
        rows = self.db.execute(
            text(
                "SELECT m.id, m.title, m.year, m.director_id, d.name AS director_name "
                "FROM movies m LEFT JOIN directors d ON d.id = m.director_id "
                "ORDER BY m.id ASC"
            )
        ).mappings()
        return [dict(r) for r in rows]

    def get_by_id(self, movie_id: int) -> dict[str, Any] | None:
        row = (
            self.db.execute(
                text(
                    "SELECT m.id, m.title, m.year, m.director_id, d.name AS director_name "
                    "FROM movies m LEFT JOIN directors d ON d.id = m.director_id "
                    "WHERE m.id = :id"
                ),
                {"id": movie_id},
            )
            .mappings()
            .first()
        )
        return dict(row) if row else None

    def create(self, title: str, director_id: int | None, year: int) -> dict[str, Any]:
        """Insert a movie and return it with the director joined in."""
        try:
            movie_id = self.db.execute(
                text(
                    "INSERT INTO movies (title, director_id, year) "
                    "VALUES (:title, :director_id, :year) RETURNING id"
                ),
                {"title": title, "director_id": director_id, "year": year},
            ).scalar_one()
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise UnknownDirectorError(director_id) from e
        return self.get_by_id(movie_id)

    def update(
        self, movie_id: int, title: str, director_id: int | None, year: int
    ) -> dict[str, Any] | None:
        """Replace a movie's fields; None when no movie has this id."""
        try:
            updated_id = self.db.execute(
                text(
                    "UPDATE movies SET title = :title, director_id = :director_id, "
                    "year = :year WHERE id = :id RETURNING id"
                ),
                {"id": movie_id, "title": title, "director_id": director_id, "year": year},
            ).scalar_one_or_none()
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise UnknownDirectorError(director_id) from e
        if updated_id is None:
            return None
        return self.get_by_id(updated_id)

    def delete(self, movie_id: int) -> bool:
        result = self.db.execute(text("DELETE FROM movies WHERE id = :id"), {"id": movie_id})
        self.db.commit()
        return result.rowcount > 0

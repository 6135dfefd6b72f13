"""ORM model for catalog movies."""

from sqlalchemy import Column, ForeignKey, Integer, String

from film_api.models.base import Base


class Movie(Base):
    """
    A movie optionally linked to a director.

    The movie does not own its director: deleting the director sets director_id to NULL.
    """

    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    director_id = Column(
        Integer,
        ForeignKey("directors.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    year = Column(Integer, nullable=False)

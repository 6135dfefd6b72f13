"""ORM model for film directors."""

from sqlalchemy import Column, Integer, String

from film_api.models.base import Base


class Director(Base):
    __tablename__ = "directors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    birth_year = Column("birthYear", Integer, nullable=False)

"""Parameterized-SQL repositories, one per table."""

from film_api.repositories.directors import DirectorRepository
from film_api.repositories.movies import MovieRepository, UnknownDirectorError
from film_api.repositories.users import DuplicateUsernameError, UserRecord, UserRepository

__all__ = [
    "DirectorRepository",
    "DuplicateUsernameError",
    "MovieRepository",
    "UnknownDirectorError",
    "UserRecord",
    "UserRepository",
]

"""Core app configuration, database and security."""

from film_api.core.config import Settings, get_settings
from film_api.core.database import get_db

__all__ = ["Settings", "get_settings", "get_db"]

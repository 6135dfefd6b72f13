"""Shared test helpers: in-memory SQLite app and auth shortcuts."""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.pool import StaticPool

from film_api.core.config import Settings
from film_api.main import create_app
from film_api.models import Base

TEST_SECRET = "test-secret-not-for-production"


def make_settings(**overrides: object) -> Settings:
    values = {"JWT_SECRET": TEST_SECRET, **overrides}
    return Settings(_env_file=None, **values)


def make_engine() -> Engine:
    """Single-connection in-memory SQLite with foreign keys enforced and the schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    return engine


class ApiTestCase(unittest.TestCase):
    """Builds a fresh app and database per test."""

    def setUp(self) -> None:
        self.engine = make_engine()
        self.app = create_app(make_settings(), engine=self.engine)
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def tearDown(self) -> None:
        self.client.close()
        self.engine.dispose()

    def register(self, username: str, password: str = "secret123", admin: bool = False):
        path = "/auth/register-admin" if admin else "/auth/register"
        return self.client.post(path, json={"username": username, "password": password})

    def login(self, username: str, password: str = "secret123"):
        return self.client.post("/auth/login", json={"username": username, "password": password})

    def auth_headers(self, username: str = "alice", admin: bool = False) -> dict[str, str]:
        """Register (if needed) and log in, returning an Authorization header."""
        self.register(username, admin=admin)
        token = self.login(username).json()["token"]
        return {"Authorization": f"Bearer {token}"}

    def create_director(self, headers: dict[str, str], name: str = "Denis Villeneuve", birth_year: int = 1967) -> dict:
        resp = self.client.post(
            "/directors", json={"name": name, "birthYear": birth_year}, headers=headers
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

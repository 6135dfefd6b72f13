"""Settings validation and boot-time failure when JWT_SECRET is missing."""

import os
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from film_api.core.config import Settings, get_settings
from film_api.main import create_app
from tests.support import make_engine, make_settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = make_settings()
        self.assertEqual(settings.PORT, 3300)
        self.assertEqual(settings.HOST, "0.0.0.0")
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(settings.SERVICE_NAME, "film-api")

    def test_missing_jwt_secret_fails(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_blank_jwt_secret_fails(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(JWT_SECRET="   ")

    def test_port_read_from_environment(self) -> None:
        with patch.dict(os.environ, {"JWT_SECRET": "s", "PORT": "8080"}, clear=True):
            self.assertEqual(Settings(_env_file=None).PORT, 8080)

    def test_invalid_port(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(PORT=70000)

    def test_non_postgres_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            make_settings(DATABASE_URL="mysql://localhost/films")

    def test_log_level_normalized(self) -> None:
        self.assertEqual(make_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            make_settings(LOG_LEVEL="chatty")


class TestBoot(unittest.TestCase):
    def setUp(self) -> None:
        get_settings.cache_clear()

    def tearDown(self) -> None:
        get_settings.cache_clear()

    def test_create_app_without_secret_fails(self) -> None:
        env = {k: v for k, v in os.environ.items() if k.upper() != "JWT_SECRET"}
        with patch.dict(os.environ, env, clear=True), patch.dict(
            Settings.model_config, {"env_file": None}
        ):
            with self.assertRaises(ValidationError):
                create_app(engine=make_engine())

    def test_create_app_wires_state(self) -> None:
        app = create_app(make_settings(), engine=make_engine())
        self.assertIsNotNone(app.state.token_service)
        self.assertEqual(app.state.settings.SERVICE_NAME, "film-api")


if __name__ == "__main__":
    unittest.main()

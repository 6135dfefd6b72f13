"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Engine

from film_api.api import router
from film_api.core.config import Settings, get_settings
from film_api.core.database import build_engine, build_session_factory
from film_api.core.errors import register_error_handlers
from film_api.core.logging_config import configure_logging
from film_api.core.security import TokenService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Build the application from validated settings.

    Settings are resolved here, not at import time, so a missing JWT_SECRET
    fails app construction instead of the first authenticated request.
    """
    settings = settings or get_settings()
    engine = engine or build_engine(settings)

    app = FastAPI(
        title="Film API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.token_service = TokenService.from_settings(settings)
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    register_error_handlers(app)
    return app


def run() -> None:
    """Console entrypoint: load .env, validate settings, serve with uvicorn."""
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    app = create_app(settings)
    logger.info("Server listening on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()

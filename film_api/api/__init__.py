"""HTTP routes."""

from fastapi import APIRouter

from film_api.api import auth, directors, health, movies

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(movies.router, prefix="/movies", tags=["movies"])
router.include_router(directors.router, prefix="/directors", tags=["directors"])

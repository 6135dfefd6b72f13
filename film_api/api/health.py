"""Status and health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from film_api.core.database import check_db_connected, get_db
from film_api.schemas.health import HealthResponse, StatusResponse

router = APIRouter()


@router.get("/status", response_model=StatusResponse)
def get_status(request: Request) -> StatusResponse:
    """Liveness probe; never touches the database."""
    return StatusResponse(ok=True, service=request.app.state.settings.SERVICE_NAME)


@router.get("/health", response_model=HealthResponse)
def get_health(request: Request, db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=request.app.state.settings.APP_ENV,
        database=db_status,
    )

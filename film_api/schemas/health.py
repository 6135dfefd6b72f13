"""Pydantic schemas for status and health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Liveness payload for GET /status."""

    ok: bool = True
    service: str


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database connectivity status when check is performed",
    )


class ErrorResponse(BaseModel):
    """Uniform error body."""

    error: str
    fields: list[str] | None = None

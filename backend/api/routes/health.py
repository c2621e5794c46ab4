"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import ServiceContainer, get_container
from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    storage: str
    notifications: str
    scheduler: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports which backends are wired in and whether the daily sweeps are scheduled.
    """
    settings = container.settings
    running = any(t.is_running for t in container.scheduler.triggers.values())
    return ReadinessResponse(
        status="ready",
        storage=settings.storage_backend,
        notifications="telegram" if settings.telegram_bot_token else "memory",
        scheduler="running" if running else "stopped",
    )

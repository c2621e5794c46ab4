"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from .dependencies import get_container
from .routes import health, scheduler, users, volunteers
from modules.adoptions.routes import router as adoptions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Starts the daily sweeps on startup and stops them on shutdown.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    sweep_scheduler = None
    if settings.enable_scheduler:
        sweep_scheduler = get_container().scheduler
        sweep_scheduler.start()
    yield
    if sweep_scheduler is not None:
        await sweep_scheduler.stop()
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Adoption trial tracking for the dog and cat shelters",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(adoptions_router, prefix="/api/adoptions", tags=["adoptions"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(volunteers.router, prefix="/api/volunteer-alerts", tags=["volunteers"])
    app.include_router(scheduler.router, prefix="/api/scheduler", tags=["scheduler"])

    return app


# Application instance for uvicorn
app = create_app()

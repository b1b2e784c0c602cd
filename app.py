"""
app.py: FastAPI application factory and startup lifecycle.

This is the ASGI application object imported by uvicorn.
It wires the repository and booking service, registers the router, and
prepares the database on startup.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from deskbooker.controllers.booking_controller import router as booking_router
from deskbooker.repository.data_repository import DataRepository
from deskbooker.services.booking_service import DeskBookingRequestService
from deskbooker.utils.config import Settings, get_settings
from deskbooker.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    The SQLite repository serves as both the desk inventory and the booking
    store for the booking service.
    """
    settings = settings or get_settings()

    repository = DataRepository(settings)
    booking_service = DeskBookingRequestService(
        desk_booking_repository=repository,
        desk_repository=repository,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _startup(app)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.include_router(booking_router)

    app.state.repository = repository
    app.state.booking_service = booking_service

    return app


def _startup(app: FastAPI) -> None:
    """Idempotent startup: schema first, then desk inventory."""
    repository: DataRepository = app.state.repository

    logger.info("Startup: initializing database schema")
    repository.initialize_database()

    logger.info("Startup: seeding desk inventory (skipped if Desks table not empty)")
    repository.seed_desks()

    logger.info("Startup complete, system ready")


# Module-level app object for uvicorn
app = create_app()

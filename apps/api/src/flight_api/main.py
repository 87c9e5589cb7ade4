"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flight_api.config import ApiSettings, settings as default_settings
from flight_api.errors import register_exception_handlers
from flight_api.middleware.trace_id import TraceIdMiddleware
from flight_api.repositories.memory import InMemoryFlightRepository
from flight_api.routers import flights
from flight_db.database import close_db, create_tables, init_db

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable
    from contextlib import AbstractAsyncContextManager

logger = logging.getLogger(__name__)


def _lifespan(
    settings: ApiSettings,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """Open the database for the SQL backend; the memory store needs nothing."""
        if settings.storage_backend != "sql":
            logger.info("Using in-memory flight store")
            yield
            return
        init_db(settings.database_url, echo=settings.database_echo)
        if settings.create_tables:
            await create_tables()
        try:
            yield
        finally:
            await close_db()

    return lifespan


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = settings or default_settings
    app = FastAPI(
        title="Flight API",
        version="0.1.0",
        description="REST API for managing flight information",
        lifespan=_lifespan(settings),
    )
    app.state.settings = settings
    if settings.storage_backend == "memory":
        app.state.flight_store = InMemoryFlightRepository()

    # Middleware (order matters: last added = first executed)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Request-ID"],
    )
    app.add_middleware(TraceIdMiddleware)

    register_exception_handlers(app)

    app.include_router(flights.router, prefix="/api")

    return app


app = create_app()

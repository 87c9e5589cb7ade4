"""FastAPI dependency injection providers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from fastapi import Depends, Request

from flight_api.middleware.trace_id import get_trace_id
from flight_api.repositories.base import FlightRepository  # noqa: TC001
from flight_api.repositories.sql import SqlFlightRepository
from flight_api.services.flight_service import FlightService
from flight_db.database import session_scope

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


async def get_flight_repository(
    request: Request,
) -> AsyncGenerator[FlightRepository]:
    """Yield the app's in-memory store, or a session-scoped SQL repository."""
    store = getattr(request.app.state, "flight_store", None)
    if store is not None:
        yield store
        return
    async with session_scope() as session:
        yield SqlFlightRepository(session)


def get_flight_service(
    repository: Annotated[FlightRepository, Depends(get_flight_repository)],
) -> FlightService:
    return FlightService(repository)


def current_trace_id(request: Request) -> str:
    """Expose the request's correlation id to route handlers."""
    return get_trace_id(request)

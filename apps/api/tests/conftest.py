"""Shared fixtures for the Flight API tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import pytest

from flight_api.config import ApiSettings
from flight_api.main import create_app

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


@pytest.fixture
def settings() -> ApiSettings:
    return ApiSettings(storage_backend="memory", cors_origins=["http://test"])


@pytest.fixture
def app(settings: ApiSettings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient]:
    """HTTP client bound to the app; app errors surface as 500 responses."""
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def make_payload():
    """Factory fixture for camelCase flight request bodies."""

    def _make(**overrides: Any) -> dict[str, Any]:
        payload = {
            "flightNumber": "XY123",
            "airline": "TestAir",
            "departureAirport": "JFK",
            "arrivalAirport": "LAX",
            "departureTime": "2025-01-01T08:00:00Z",
            "arrivalTime": "2025-01-01T11:00:00Z",
            "status": "Scheduled",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'flights.db'}"

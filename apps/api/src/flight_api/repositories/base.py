"""Storage contract for flights."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from flight_api.schemas.flights import FlightBody, FlightItem


class FlightRepository(Protocol):
    """CRUD access to stored flights.

    Lookups return ``None`` for a missing id; ``update`` and ``delete`` on
    a missing id do nothing. Any other storage failure propagates.
    """

    async def get_all(self) -> list[FlightItem]: ...

    async def get_by_id(self, flight_id: int) -> FlightItem | None: ...

    async def add(self, flight: FlightBody) -> FlightItem: ...

    async def update(self, flight_id: int, flight: FlightBody) -> None: ...

    async def delete(self, flight_id: int) -> None: ...

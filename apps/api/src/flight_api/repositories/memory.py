"""In-process flight store."""

from __future__ import annotations

import itertools

from flight_api.schemas.flights import FlightBody, FlightItem


class InMemoryFlightRepository:
    """Keeps flights in a dict keyed by id; ids start at 1."""

    def __init__(self) -> None:
        self._flights: dict[int, FlightItem] = {}
        self._ids = itertools.count(1)

    async def get_all(self) -> list[FlightItem]:
        return [
            flight.model_copy() for _, flight in sorted(self._flights.items())
        ]

    async def get_by_id(self, flight_id: int) -> FlightItem | None:
        flight = self._flights.get(flight_id)
        return flight.model_copy() if flight is not None else None

    async def add(self, flight: FlightBody) -> FlightItem:
        stored = FlightItem(id=next(self._ids), **_fields(flight))
        self._flights[stored.id] = stored
        return stored.model_copy()

    async def update(self, flight_id: int, flight: FlightBody) -> None:
        if flight_id in self._flights:
            self._flights[flight_id] = FlightItem(id=flight_id, **_fields(flight))

    async def delete(self, flight_id: int) -> None:
        self._flights.pop(flight_id, None)


def _fields(flight: FlightBody) -> dict:
    return flight.model_dump(include=set(FlightBody.model_fields))

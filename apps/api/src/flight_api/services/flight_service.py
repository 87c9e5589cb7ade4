"""Flight business logic."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flight_api.repositories.base import FlightRepository
    from flight_api.schemas.flights import FlightBody, FlightItem


class FlightService:
    """Delegates CRUD to the repository and filters search results."""

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    async def get_all(self) -> list[FlightItem]:
        return await self._repository.get_all()

    async def get_by_id(self, flight_id: int) -> FlightItem | None:
        return await self._repository.get_by_id(flight_id)

    async def create(self, flight: FlightBody) -> FlightItem:
        return await self._repository.add(flight)

    async def update(self, flight_id: int, flight: FlightBody) -> None:
        await self._repository.update(flight_id, flight)

    async def delete(self, flight_id: int) -> None:
        await self._repository.delete(flight_id)

    async def search(
        self,
        airline: str = "",
        departure: str = "",
        arrival: str = "",
    ) -> list[FlightItem]:
        """Return flights matching every non-empty criterion.

        Matching is exact and case-sensitive; an empty criterion does not
        filter.
        """
        flights = await self._repository.get_all()
        return [
            f
            for f in flights
            if (not airline or f.airline == airline)
            and (not departure or f.departure_airport == departure)
            and (not arrival or f.arrival_airport == arrival)
        ]

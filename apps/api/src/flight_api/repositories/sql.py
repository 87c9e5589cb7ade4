"""SQLAlchemy-backed flight repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, select

from flight_api.schemas.flights import FlightBody, FlightItem
from flight_db.models import Flight

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class SqlFlightRepository:
    """Reads and writes the ``flights`` table through one session."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def get_all(self) -> list[FlightItem]:
        result = await self._db.execute(select(Flight).order_by(Flight.id))
        return [FlightItem.model_validate(row) for row in result.scalars().all()]

    async def get_by_id(self, flight_id: int) -> FlightItem | None:
        row = await self._db.get(Flight, flight_id)
        if row is None:
            return None
        return FlightItem.model_validate(row)

    async def add(self, flight: FlightBody) -> FlightItem:
        row = Flight(**flight.model_dump(include=set(FlightBody.model_fields)))
        self._db.add(row)
        await self._db.flush()
        return FlightItem.model_validate(row)

    async def update(self, flight_id: int, flight: FlightBody) -> None:
        row = await self._db.get(Flight, flight_id)
        if row is None:
            return
        for key, value in flight.model_dump(
            include=set(FlightBody.model_fields)
        ).items():
            setattr(row, key, value)
        await self._db.flush()

    async def delete(self, flight_id: int) -> None:
        await self._db.execute(delete(Flight).where(Flight.id == flight_id))
        await self._db.flush()

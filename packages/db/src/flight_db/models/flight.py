"""Flight model."""

from __future__ import annotations

import enum
from datetime import datetime  # noqa: TC003

from sqlalchemy import DateTime, Enum, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, IntegerPrimaryKeyMixin


class FlightStatus(enum.StrEnum):
    """Operational status of a flight."""

    SCHEDULED = "Scheduled"
    DELAYED = "Delayed"
    DEPARTED = "Departed"
    ARRIVED = "Arrived"
    CANCELLED = "Cancelled"


FLIGHT_NUMBER_MAX_LENGTH = 10
AIRLINE_MAX_LENGTH = 50
AIRPORT_CODE_MIN_LENGTH = 3
AIRPORT_CODE_MAX_LENGTH = 5

# Ids are 32-bit signed integers.
FLIGHT_ID_MIN = -(2**31)
FLIGHT_ID_MAX = 2**31 - 1


class Flight(IntegerPrimaryKeyMixin, Base):
    """Flights table - one row per scheduled flight."""

    __tablename__ = "flights"

    flight_number: Mapped[str] = mapped_column(
        String(FLIGHT_NUMBER_MAX_LENGTH), nullable=False
    )
    airline: Mapped[str] = mapped_column(String(AIRLINE_MAX_LENGTH), nullable=False)
    departure_airport: Mapped[str] = mapped_column(
        String(AIRPORT_CODE_MAX_LENGTH), nullable=False
    )
    arrival_airport: Mapped[str] = mapped_column(
        String(AIRPORT_CODE_MAX_LENGTH), nullable=False
    )
    departure_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    arrival_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    status: Mapped[FlightStatus] = mapped_column(
        Enum(FlightStatus, name="flight_status"), nullable=False
    )

    __table_args__ = (
        Index("ix_flights_airline", "airline"),
        Index("ix_flights_departure_arrival", "departure_airport", "arrival_airport"),
    )

    def __repr__(self) -> str:
        return f"<Flight {self.id} {self.flight_number} ({self.status.value})>"

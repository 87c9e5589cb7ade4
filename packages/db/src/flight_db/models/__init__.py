"""SQLAlchemy ORM models for the Flight API."""

from .base import Base, IntegerPrimaryKeyMixin
from .flight import (
    AIRLINE_MAX_LENGTH,
    AIRPORT_CODE_MAX_LENGTH,
    AIRPORT_CODE_MIN_LENGTH,
    FLIGHT_ID_MAX,
    FLIGHT_ID_MIN,
    FLIGHT_NUMBER_MAX_LENGTH,
    Flight,
    FlightStatus,
)

__all__ = [
    "AIRLINE_MAX_LENGTH",
    "AIRPORT_CODE_MAX_LENGTH",
    "AIRPORT_CODE_MIN_LENGTH",
    "FLIGHT_ID_MAX",
    "FLIGHT_ID_MIN",
    "FLIGHT_NUMBER_MAX_LENGTH",
    "Base",
    "Flight",
    "FlightStatus",
    "IntegerPrimaryKeyMixin",
]

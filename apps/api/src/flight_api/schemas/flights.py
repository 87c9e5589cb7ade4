"""Flight request/response schemas."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from flight_db.models import (
    AIRLINE_MAX_LENGTH,
    AIRPORT_CODE_MAX_LENGTH,
    AIRPORT_CODE_MIN_LENGTH,
    FLIGHT_NUMBER_MAX_LENGTH,
    FlightStatus,
)


class FlightBody(BaseModel):
    """Flight fields accepted on create and update.

    Keys are matched case-insensitively, so ``FlightNumber``,
    ``flightNumber`` and ``flight_number`` all bind to the same field.
    Naive timestamps are taken to be UTC.
    """

    flight_number: str = Field(max_length=FLIGHT_NUMBER_MAX_LENGTH)
    airline: str = Field(max_length=AIRLINE_MAX_LENGTH)
    departure_airport: str = Field(
        min_length=AIRPORT_CODE_MIN_LENGTH,
        max_length=AIRPORT_CODE_MAX_LENGTH,
        description="IATA or ICAO airport code",
    )
    arrival_airport: str = Field(
        min_length=AIRPORT_CODE_MIN_LENGTH,
        max_length=AIRPORT_CODE_MAX_LENGTH,
        description="IATA or ICAO airport code",
    )
    departure_time: datetime
    arrival_time: datetime = Field(description="Must be after departure_time")
    status: FlightStatus

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        lookup: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            lookup[name.lower()] = alias
            lookup[alias.lower()] = alias
        return {
            lookup.get(key.lower(), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }

    @field_validator(
        "flight_number",
        "airline",
        "departure_airport",
        "arrival_airport",
        mode="before",
    )
    @classmethod
    def _not_blank(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            raise PydanticCustomError("blank", "Value must not be blank")
        return value

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        try:
            return value.astimezone(UTC)
        except OverflowError:
            raise PydanticCustomError(
                "datetime_range", "Timestamp is out of range once converted to UTC"
            ) from None

    @field_validator("arrival_time")
    @classmethod
    def _arrival_after_departure(
        cls, value: datetime, info: ValidationInfo
    ) -> datetime:
        departure = info.data.get("departure_time")
        if departure is not None and value <= departure:
            raise PydanticCustomError(
                "arrival_not_after_departure",
                "ArrivalTime must be after DepartureTime.",
            )
        return value


class FlightItem(FlightBody):
    """A stored flight, as returned by the API."""

    id: int

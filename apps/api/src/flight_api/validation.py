"""Turn pydantic validation errors into a field -> messages mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from flight_db.models import (
    AIRLINE_MAX_LENGTH,
    AIRPORT_CODE_MAX_LENGTH,
    AIRPORT_CODE_MIN_LENGTH,
    FLIGHT_NUMBER_MAX_LENGTH,
)

from .schemas.flights import FlightBody

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

BODY_KEY = "body"

_REQUEST_LOCATIONS = {"body", "path", "query", "header", "cookie"}

_BODY_REQUIRED = "A non-empty request body is required."
_BODY_INVALID = "The request body is not valid JSON."


def _required(label: str) -> dict[str, str]:
    message = f"{label} is required."
    return {"missing": message, "blank": message}


def _airport(label: str) -> dict[str, str]:
    message = (
        f"{label} must be {AIRPORT_CODE_MIN_LENGTH}-{AIRPORT_CODE_MAX_LENGTH} "
        "characters."
    )
    return {
        **_required(label),
        "string_too_short": message,
        "string_too_long": message,
    }


_FIELD_MESSAGES: dict[str, dict[str, str]] = {
    "flightNumber": {
        **_required("FlightNumber"),
        "string_too_long": (
            f"FlightNumber cannot exceed {FLIGHT_NUMBER_MAX_LENGTH} characters."
        ),
    },
    "airline": {
        **_required("Airline"),
        "string_too_long": f"Airline cannot exceed {AIRLINE_MAX_LENGTH} characters.",
    },
    "departureAirport": _airport("DepartureAirport"),
    "arrivalAirport": _airport("ArrivalAirport"),
    "departureTime": _required("DepartureTime"),
    "arrivalTime": _required("ArrivalTime"),
    "status": {**_required("Status"), "enum": "Invalid FlightStatus value."},
}


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = list(loc)
    if parts and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    if not parts:
        return BODY_KEY
    return str(parts[0])


def _message(field: str, error: Mapping[str, Any]) -> str:
    error_type = error["type"]
    if field == BODY_KEY:
        if error_type == "missing":
            return _BODY_REQUIRED
        if error_type == "json_invalid":
            return _BODY_INVALID
    return _FIELD_MESSAGES.get(field, {}).get(error_type, error["msg"])


def collect_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """Group every error under the request field it refers to."""
    result: dict[str, list[str]] = {}
    for error in errors:
        if error["type"] == "json_invalid":
            field = BODY_KEY
        else:
            field = _field_name(tuple(error["loc"]))
        message = _message(field, error)
        messages = result.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return result


def validate_flight(data: Any) -> dict[str, list[str]]:
    """Run every flight rule on *data*; an empty mapping means it is valid."""
    try:
        FlightBody.model_validate(data)
    except ValidationError as exc:
        return collect_errors(exc.errors())
    return {}

"""Field and cross-field rules for flight bodies."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from flight_api.schemas.flights import FlightBody
from flight_api.validation import collect_errors, validate_flight
from flight_db.models import FlightStatus


def test_valid_payload_has_no_errors(make_payload):
    assert validate_flight(make_payload()) == {}


@pytest.mark.parametrize(
    "arrival",
    ["2025-01-01T08:00:00Z", "2025-01-01T07:59:59Z", "2024-12-31T23:00:00Z"],
)
def test_arrival_not_after_departure_is_rejected(make_payload, arrival):
    errors = validate_flight(make_payload(arrivalTime=arrival))
    assert errors == {"arrivalTime": ["ArrivalTime must be after DepartureTime."]}


def test_arrival_rule_compares_instants_across_offsets(make_payload):
    # 10:00+02:00 is 08:00Z, equal to departure.
    errors = validate_flight(make_payload(arrivalTime="2025-01-01T10:00:00+02:00"))
    assert "arrivalTime" in errors


@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("flightNumber", "X" * 11, "FlightNumber cannot exceed 10 characters."),
        ("airline", "A" * 51, "Airline cannot exceed 50 characters."),
        ("departureAirport", "JF", "DepartureAirport must be 3-5 characters."),
        ("departureAirport", "KJFKX1", "DepartureAirport must be 3-5 characters."),
        ("arrivalAirport", "LA", "ArrivalAirport must be 3-5 characters."),
        ("arrivalAirport", "KLAXX1", "ArrivalAirport must be 3-5 characters."),
        ("status", "Boarding", "Invalid FlightStatus value."),
        ("flightNumber", "   ", "FlightNumber is required."),
        ("airline", "", "Airline is required."),
    ],
)
def test_field_rule_cites_field(make_payload, field, value, message):
    errors = validate_flight(make_payload(**{field: value}))
    assert errors == {field: [message]}


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("flightNumber", "X" * 10),
        ("airline", "A" * 50),
        ("departureAirport", "JFK"),
        ("departureAirport", "KJFK1"),
        ("arrivalAirport", "EGLL"),
    ],
)
def test_boundary_lengths_are_accepted(make_payload, field, value):
    assert validate_flight(make_payload(**{field: value})) == {}


def test_every_violation_is_collected():
    errors = validate_flight({})
    assert errors == {
        "flightNumber": ["FlightNumber is required."],
        "airline": ["Airline is required."],
        "departureAirport": ["DepartureAirport is required."],
        "arrivalAirport": ["ArrivalAirport is required."],
        "departureTime": ["DepartureTime is required."],
        "arrivalTime": ["ArrivalTime is required."],
        "status": ["Status is required."],
    }


def test_multiple_fields_fail_together(make_payload):
    errors = validate_flight(
        make_payload(
            flightNumber="TOO-LONG-NUMBER",
            departureAirport="X",
            arrivalTime="2025-01-01T07:00:00Z",
        )
    )
    assert set(errors) == {"flightNumber", "departureAirport", "arrivalTime"}


def test_unparseable_timestamp_keeps_parser_message(make_payload):
    errors = validate_flight(make_payload(departureTime="not-a-date"))
    assert list(errors) == ["departureTime"]
    assert errors["departureTime"][0]


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("departureTime", "0001-01-01T00:00:00+01:00"),
        ("arrivalTime", "9999-12-31T23:00:00-05:00"),
    ],
)
def test_timestamp_outside_utc_range_is_a_field_error(make_payload, field, value):
    errors = validate_flight(make_payload(**{field: value}))
    assert list(errors) == [field]
    assert errors[field] == ["Timestamp is out of range once converted to UTC"]


def test_keys_match_case_insensitively():
    flight = FlightBody.model_validate(
        {
            "FlightNumber": "XY123",
            "Airline": "TestAir",
            "DepartureAirport": "JFK",
            "arrival_airport": "LAX",
            "DEPARTURETIME": "2025-01-01T08:00Z",
            "ArrivalTime": "2025-01-01T11:00Z",
            "Status": "Scheduled",
        }
    )
    assert flight.flight_number == "XY123"
    assert flight.arrival_airport == "LAX"
    assert flight.status is FlightStatus.SCHEDULED


def test_naive_timestamps_are_utc(make_payload):
    flight = FlightBody.model_validate(
        make_payload(
            departureTime="2025-01-01T08:00:00",
            arrivalTime="2025-01-01T11:00:00",
        )
    )
    assert flight.departure_time == datetime(2025, 1, 1, 8, tzinfo=UTC)
    assert flight.departure_time.tzinfo is UTC


def test_body_errors_are_keyed_under_body():
    errors = collect_errors(
        [
            {"type": "missing", "loc": ("body",), "msg": "Field required"},
            {"type": "json_invalid", "loc": ("body", 7), "msg": "JSON decode error"},
        ]
    )
    assert errors == {
        "body": [
            "A non-empty request body is required.",
            "The request body is not valid JSON.",
        ]
    }


def test_path_errors_use_parameter_name():
    errors = collect_errors(
        [
            {
                "type": "int_parsing",
                "loc": ("path", "flight_id"),
                "msg": "Input should be a valid integer",
            }
        ]
    )
    assert errors == {"flight_id": ["Input should be a valid integer"]}

"""In-memory flight store."""

from __future__ import annotations

import pytest

from flight_api.repositories.memory import InMemoryFlightRepository
from flight_api.schemas.flights import FlightBody
from flight_db.models import FlightStatus


@pytest.fixture
def body(make_payload) -> FlightBody:
    return FlightBody.model_validate(make_payload())


async def test_add_assigns_increasing_ids(body):
    repository = InMemoryFlightRepository()

    first = await repository.add(body)
    second = await repository.add(body)

    assert (first.id, second.id) == (1, 2)
    assert [f.id for f in await repository.get_all()] == [1, 2]


async def test_get_by_id_missing_returns_none():
    assert await InMemoryFlightRepository().get_by_id(7) is None


async def test_returned_records_are_copies(body):
    repository = InMemoryFlightRepository()
    created = await repository.add(body)

    created.airline = "Mutated"

    stored = await repository.get_by_id(created.id)
    assert stored.airline == "TestAir"


async def test_update_replaces_all_fields_but_id(body, make_payload):
    repository = InMemoryFlightRepository()
    created = await repository.add(body)
    replacement = FlightBody.model_validate(
        make_payload(flightNumber="ZZ9", airline="Other", status="Delayed")
    )

    await repository.update(created.id, replacement)

    stored = await repository.get_by_id(created.id)
    assert stored.id == created.id
    assert stored.flight_number == "ZZ9"
    assert stored.airline == "Other"
    assert stored.status is FlightStatus.DELAYED


async def test_update_and_delete_missing_are_noops(body):
    repository = InMemoryFlightRepository()
    await repository.add(body)

    await repository.update(99, body)
    await repository.delete(99)

    assert len(await repository.get_all()) == 1
    assert await repository.get_by_id(99) is None


async def test_delete_removes_record_and_ids_are_not_reused(body):
    repository = InMemoryFlightRepository()
    created = await repository.add(body)

    await repository.delete(created.id)
    again = await repository.add(body)

    assert await repository.get_by_id(created.id) is None
    assert again.id == created.id + 1

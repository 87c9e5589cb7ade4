"""Flight CRUD and search endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from flight_api.dependencies import current_trace_id, get_flight_service
from flight_api.errors import problem_response
from flight_api.schemas.common import (
    NotFoundResponse,
    ProblemDetails,
    ValidationErrorResponse,
)
from flight_api.schemas.flights import FlightBody, FlightItem
from flight_api.services.flight_service import FlightService
from flight_db.models import FLIGHT_ID_MAX, FLIGHT_ID_MIN

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/flights",
    tags=["flights"],
    responses={400: {"model": ValidationErrorResponse}},
)

ServiceDep = Annotated[FlightService, Depends(get_flight_service)]
TraceId = Annotated[str, Depends(current_trace_id)]
FlightId = Annotated[int, Path(ge=FLIGHT_ID_MIN, le=FLIGHT_ID_MAX)]


def _not_found_message(flight_id: int) -> str:
    return f"Flight with ID {flight_id} not found."


def _not_found(flight_id: int, trace_id: str) -> JSONResponse:
    body = NotFoundResponse(message=_not_found_message(flight_id), trace_id=trace_id)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=body.model_dump(by_alias=True),
    )


@router.get("", response_model=list[FlightItem])
async def list_flights(service: ServiceDep) -> list[FlightItem]:
    """Return every flight."""
    return await service.get_all()


# Declared before "/{flight_id}" so "search" is not parsed as an id.
@router.get("/search", response_model=list[FlightItem])
async def search_flights(
    service: ServiceDep,
    airline: Annotated[str, Query()] = "",
    departure: Annotated[str, Query()] = "",
    arrival: Annotated[str, Query()] = "",
) -> list[FlightItem]:
    """Filter flights by exact airline, departure and arrival airport."""
    return await service.search(airline, departure, arrival)


@router.get(
    "/{flight_id}",
    response_model=FlightItem,
    responses={404: {"model": NotFoundResponse}},
)
async def get_flight(
    flight_id: FlightId,
    service: ServiceDep,
    trace_id: TraceId,
) -> FlightItem | JSONResponse:
    flight = await service.get_by_id(flight_id)
    if flight is None:
        logger.warning(
            "Flight with ID %s not found (TraceId: %s)", flight_id, trace_id
        )
        return _not_found(flight_id, trace_id)
    return flight


@router.post(
    "",
    response_model=FlightItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_flight(
    flight: FlightBody,
    request: Request,
    response: Response,
    service: ServiceDep,
    trace_id: TraceId,
) -> FlightItem:
    """Store a new flight and point Location at it."""
    created = await service.create(flight)
    logger.info(
        "Flight with ID %s created successfully (TraceId: %s)", created.id, trace_id
    )
    response.headers["Location"] = str(
        request.url_for("get_flight", flight_id=created.id)
    )
    return created


@router.put(
    "/{flight_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ProblemDetails}},
)
async def update_flight(
    flight_id: FlightId,
    flight: FlightBody,
    service: ServiceDep,
    trace_id: TraceId,
) -> Response:
    """Replace every field of an existing flight."""
    existing = await service.get_by_id(flight_id)
    if existing is None:
        logger.warning(
            "Update failed. Flight with ID %s not found (TraceId: %s)",
            flight_id,
            trace_id,
        )
        return problem_response(
            ProblemDetails(
                title="Flight not found",
                detail=_not_found_message(flight_id),
                status=status.HTTP_404_NOT_FOUND,
                instance=trace_id,
            )
        )

    await service.update(flight_id, flight)
    logger.info(
        "Flight with ID %s updated successfully (TraceId: %s)", flight_id, trace_id
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{flight_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": NotFoundResponse}},
)
async def delete_flight(
    flight_id: FlightId,
    service: ServiceDep,
    trace_id: TraceId,
) -> Response:
    existing = await service.get_by_id(flight_id)
    if existing is None:
        logger.warning(
            "Delete failed. Flight with ID %s not found (TraceId: %s)",
            flight_id,
            trace_id,
        )
        return _not_found(flight_id, trace_id)

    await service.delete(flight_id)
    logger.info(
        "Flight with ID %s deleted successfully (TraceId: %s)", flight_id, trace_id
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Exception handlers that shape error responses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .middleware.trace_id import TRACE_ID_HEADER, get_trace_id
from .schemas.common import ProblemDetails, ValidationErrorResponse
from .validation import collect_errors

if TYPE_CHECKING:
    from fastapi import FastAPI
    from starlette.requests import Request

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


def problem_response(problem: ProblemDetails) -> JSONResponse:
    """Render a problem body with the problem+json media type."""
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(),
        media_type=PROBLEM_MEDIA_TYPE,
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    trace_id = get_trace_id(request)
    errors = collect_errors(exc.errors())
    logger.warning(
        "Invalid request to %s %s: %s (TraceId: %s)",
        request.method,
        request.url.path,
        errors,
        trace_id,
    )
    body = ValidationErrorResponse(errors=errors, trace_id=trace_id)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(by_alias=True),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log the fault and hide everything but its message."""
    trace_id = get_trace_id(request)
    logger.error(
        "Unhandled exception occurred with TraceId %s",
        trace_id,
        exc_info=exc,
    )
    response = problem_response(
        ProblemDetails(
            title="An unexpected error occurred",
            detail=str(exc),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            instance=trace_id,
        )
    )
    response.headers[TRACE_ID_HEADER] = trace_id
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

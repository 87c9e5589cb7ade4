"""Per-request correlation identifier middleware."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

if TYPE_CHECKING:
    from starlette.requests import HTTPConnection, Request
    from starlette.responses import Response

TRACE_ID_HEADER = "X-Request-ID"


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with a trace id and echo it in the response."""

    async def dispatch(self, request: Request, call_next) -> Response:
        """Reuse the caller's X-Request-ID or mint a new one."""
        trace_id = request.headers.get(TRACE_ID_HEADER) or uuid.uuid4().hex
        request.state.trace_id = trace_id
        response = await call_next(request)
        response.headers[TRACE_ID_HEADER] = trace_id
        return response


def get_trace_id(request: HTTPConnection) -> str:
    """Return the request's trace id, minting one if the middleware did not run."""
    trace_id = getattr(request.state, "trace_id", None)
    if trace_id is None:
        trace_id = uuid.uuid4().hex
        request.state.trace_id = trace_id
    return trace_id

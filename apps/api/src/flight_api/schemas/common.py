"""Shared error response schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class NotFoundResponse(BaseModel):
    """Plain not-found payload used by lookup and delete."""

    message: str
    trace_id: str
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidationErrorResponse(BaseModel):
    """Field -> messages mapping for a rejected request."""

    errors: dict[str, list[str]]
    trace_id: str
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProblemDetails(BaseModel):
    """Structured problem body (title, detail, status, instance)."""

    title: str
    detail: str | None = None
    status: int
    instance: str | None = None

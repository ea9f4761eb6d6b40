"""Models for the error envelope returned by Google JSON APIs."""

from typing import Any, Optional

from pubsub_rest.models.base import CamelCaseModel


class ErrorStatus(CamelCaseModel):
    """Structured error information."""

    code: int
    message: str = ""
    status: Optional[str] = None  # Canonical code name (NOT_FOUND, ALREADY_EXISTS, ...)
    details: list[dict[str, Any]] = []


class ErrorEnvelope(CamelCaseModel):
    """Top-level error body: {"error": {...}}."""

    error: ErrorStatus

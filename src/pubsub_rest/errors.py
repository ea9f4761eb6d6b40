"""Errors raised for unsuccessful Pub/Sub API responses."""

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from pubsub_rest.models.error import ErrorEnvelope

NOT_FOUND = 404


class ApiError(Exception):
    """
    A non-2xx response from the Pub/Sub API.

    Transport failures (timeouts, refused connections) are not wrapped;
    they surface as the httpx exceptions that caused them.
    """

    def __init__(
        self,
        code: int,
        message: str,
        status: str = "",
        details: Optional[list[dict[str, Any]]] = None,
        body: str = "",
    ):
        super().__init__(f"pubsub: error {code}: {message}")
        self.code = code
        self.message = message
        self.status = status
        self.details = details or []
        self.body = body

    @property
    def not_found(self) -> bool:
        return self.code == NOT_FOUND

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """
        Build an error from a response, parsing the JSON error envelope when present.

        Args:
            response: The unsuccessful response

        Returns:
            ApiError carrying the HTTP status and the service's message
        """
        body = response.text
        try:
            envelope = ErrorEnvelope.model_validate_json(body)
        except ValidationError:
            return cls(code=response.status_code, message=body, body=body)

        return cls(
            code=response.status_code,
            message=envelope.error.message,
            status=envelope.error.status or "",
            details=envelope.error.details,
            body=body,
        )

"""Shared fixtures: an in-process fake of the Pub/Sub REST API."""

import json
from typing import Any, Optional

import httpx
import pytest
import pytest_asyncio

BASE_URL = "https://pubsub.test/"

NOT_FOUND_BODY = {
    "error": {"code": 404, "message": "Resource not found", "status": "NOT_FOUND"}
}


class FakePubSub:
    """
    Serves canned responses keyed by (method, path, pageToken) and records requests.

    Unknown routes answer 404 with the standard error envelope.
    """

    def __init__(self):
        self.routes: dict[tuple, tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.error: Optional[Exception] = None

    def add(
        self,
        method: str,
        path: str,
        body: Any = None,
        status: int = 200,
        page_token: Optional[str] = None,
    ) -> None:
        self.routes[(method, path, page_token)] = (status, body)

    def fail_with(self, error: Exception) -> None:
        """Raise error from the transport instead of answering."""
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        key = (request.method, request.url.path, request.url.params.get("pageToken"))
        if key not in self.routes:
            return httpx.Response(404, json=NOT_FOUND_BODY)
        status, body = self.routes[key]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def last_body(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_pubsub():
    """Create the fake API."""
    return FakePubSub()


@pytest.fixture
def http_client(fake_pubsub):
    """Synchronous httpx client routed to the fake API."""
    client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(fake_pubsub.handler))
    yield client
    client.close()


@pytest_asyncio.fixture
async def async_http_client(fake_pubsub):
    """Async httpx client routed to the fake API."""
    client = httpx.AsyncClient(
        base_url=BASE_URL, transport=httpx.MockTransport(fake_pubsub.handler)
    )
    yield client
    await client.aclose()

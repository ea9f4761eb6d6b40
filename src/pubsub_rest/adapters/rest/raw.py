"""Thin httpx bindings for the Pub/Sub v1 REST surface."""

import logging
from typing import Any, Optional

import httpx

from pubsub_rest.errors import ApiError
from pubsub_rest.models.wire import (
    AcknowledgeRequest,
    ListSubscriptionsResponse,
    ListTopicSubscriptionsResponse,
    ListTopicsResponse,
    ModifyAckDeadlineRequest,
    ModifyPushConfigRequest,
    PublishRequest,
    PublishResponse,
    PullRequest,
    PullResponse,
    Subscription,
    Topic,
)

logger = logging.getLogger(__name__)

API_VERSION = "v1"


def _request_options(
    body: Optional[dict[str, Any]],
    page_token: Optional[str],
    timeout: Optional[float],
) -> dict[str, Any]:
    options: dict[str, Any] = {}
    if body is not None:
        options["json"] = body
    if page_token:
        options["params"] = {"pageToken": page_token}
    if timeout is not None:
        options["timeout"] = timeout
    return options


def _decode(response: httpx.Response) -> dict[str, Any]:
    if not response.is_success:
        raise ApiError.from_response(response)
    if not response.content:
        return {}
    return response.json()


class RawPubSubApi:
    """
    One method per Pub/Sub REST call over a synchronous httpx client.

    Resource names are full paths ("projects/p/topics/t") and are placed
    under "v1/" relative to the client's base_url. Errors are not retried.
    """

    def __init__(self, client: httpx.Client):
        self._client = client

    def _call(
        self,
        method: str,
        path: str,
        body: Optional[dict[str, Any]] = None,
        page_token: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> dict[str, Any]:
        logger.debug("%s %s/%s", method, API_VERSION, path)
        response = self._client.request(
            method, f"/{API_VERSION}/{path}", **_request_options(body, page_token, timeout)
        )
        return _decode(response)

    # Topics

    def topics_create(self, name: str, topic: Topic, timeout: Optional[float] = None) -> Topic:
        data = self._call("PUT", name, body=topic.to_body(), timeout=timeout)
        return Topic.model_validate(data)

    def topics_get(self, name: str, timeout: Optional[float] = None) -> Topic:
        return Topic.model_validate(self._call("GET", name, timeout=timeout))

    def topics_delete(self, name: str, timeout: Optional[float] = None) -> None:
        self._call("DELETE", name, timeout=timeout)

    def topics_list(
        self, project: str, page_token: Optional[str] = None, timeout: Optional[float] = None
    ) -> ListTopicsResponse:
        data = self._call("GET", f"{project}/topics", page_token=page_token, timeout=timeout)
        return ListTopicsResponse.model_validate(data)

    def topics_subscriptions_list(
        self, topic: str, page_token: Optional[str] = None, timeout: Optional[float] = None
    ) -> ListTopicSubscriptionsResponse:
        data = self._call("GET", f"{topic}/subscriptions", page_token=page_token, timeout=timeout)
        return ListTopicSubscriptionsResponse.model_validate(data)

    def topics_publish(
        self, topic: str, request: PublishRequest, timeout: Optional[float] = None
    ) -> PublishResponse:
        data = self._call("POST", f"{topic}:publish", body=request.to_body(), timeout=timeout)
        return PublishResponse.model_validate(data)

    # Subscriptions

    def subscriptions_create(
        self, name: str, subscription: Subscription, timeout: Optional[float] = None
    ) -> Subscription:
        data = self._call("PUT", name, body=subscription.to_body(), timeout=timeout)
        return Subscription.model_validate(data)

    def subscriptions_get(self, name: str, timeout: Optional[float] = None) -> Subscription:
        return Subscription.model_validate(self._call("GET", name, timeout=timeout))

    def subscriptions_delete(self, name: str, timeout: Optional[float] = None) -> None:
        self._call("DELETE", name, timeout=timeout)

    def subscriptions_list(
        self, project: str, page_token: Optional[str] = None, timeout: Optional[float] = None
    ) -> ListSubscriptionsResponse:
        data = self._call(
            "GET", f"{project}/subscriptions", page_token=page_token, timeout=timeout
        )
        return ListSubscriptionsResponse.model_validate(data)

    def subscriptions_modify_ack_deadline(
        self, name: str, request: ModifyAckDeadlineRequest, timeout: Optional[float] = None
    ) -> None:
        self._call("POST", f"{name}:modifyAckDeadline", body=request.to_body(), timeout=timeout)

    def subscriptions_modify_push_config(
        self, name: str, request: ModifyPushConfigRequest, timeout: Optional[float] = None
    ) -> None:
        self._call("POST", f"{name}:modifyPushConfig", body=request.to_body(), timeout=timeout)

    def subscriptions_pull(
        self, name: str, request: PullRequest, timeout: Optional[float] = None
    ) -> PullResponse:
        data = self._call("POST", f"{name}:pull", body=request.to_body(), timeout=timeout)
        return PullResponse.model_validate(data)

    def subscriptions_acknowledge(
        self, name: str, request: AcknowledgeRequest, timeout: Optional[float] = None
    ) -> None:
        self._call("POST", f"{name}:acknowledge", body=request.to_body(), timeout=timeout)


class AsyncRawPubSubApi:
    """Async counterpart of RawPubSubApi over an httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def _call(
        self,
        method: str,
        path: str,
        body: Optional[dict[str, Any]] = None,
        page_token: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> dict[str, Any]:
        logger.debug("%s %s/%s", method, API_VERSION, path)
        response = await self._client.request(
            method, f"/{API_VERSION}/{path}", **_request_options(body, page_token, timeout)
        )
        return _decode(response)

    # Topics

    async def topics_create(
        self, name: str, topic: Topic, timeout: Optional[float] = None
    ) -> Topic:
        data = await self._call("PUT", name, body=topic.to_body(), timeout=timeout)
        return Topic.model_validate(data)

    async def topics_get(self, name: str, timeout: Optional[float] = None) -> Topic:
        return Topic.model_validate(await self._call("GET", name, timeout=timeout))

    async def topics_delete(self, name: str, timeout: Optional[float] = None) -> None:
        await self._call("DELETE", name, timeout=timeout)

    async def topics_list(
        self, project: str, page_token: Optional[str] = None, timeout: Optional[float] = None
    ) -> ListTopicsResponse:
        data = await self._call("GET", f"{project}/topics", page_token=page_token, timeout=timeout)
        return ListTopicsResponse.model_validate(data)

    async def topics_subscriptions_list(
        self, topic: str, page_token: Optional[str] = None, timeout: Optional[float] = None
    ) -> ListTopicSubscriptionsResponse:
        data = await self._call(
            "GET", f"{topic}/subscriptions", page_token=page_token, timeout=timeout
        )
        return ListTopicSubscriptionsResponse.model_validate(data)

    async def topics_publish(
        self, topic: str, request: PublishRequest, timeout: Optional[float] = None
    ) -> PublishResponse:
        data = await self._call("POST", f"{topic}:publish", body=request.to_body(), timeout=timeout)
        return PublishResponse.model_validate(data)

    # Subscriptions

    async def subscriptions_create(
        self, name: str, subscription: Subscription, timeout: Optional[float] = None
    ) -> Subscription:
        data = await self._call("PUT", name, body=subscription.to_body(), timeout=timeout)
        return Subscription.model_validate(data)

    async def subscriptions_get(self, name: str, timeout: Optional[float] = None) -> Subscription:
        return Subscription.model_validate(await self._call("GET", name, timeout=timeout))

    async def subscriptions_delete(self, name: str, timeout: Optional[float] = None) -> None:
        await self._call("DELETE", name, timeout=timeout)

    async def subscriptions_list(
        self, project: str, page_token: Optional[str] = None, timeout: Optional[float] = None
    ) -> ListSubscriptionsResponse:
        data = await self._call(
            "GET", f"{project}/subscriptions", page_token=page_token, timeout=timeout
        )
        return ListSubscriptionsResponse.model_validate(data)

    async def subscriptions_modify_ack_deadline(
        self, name: str, request: ModifyAckDeadlineRequest, timeout: Optional[float] = None
    ) -> None:
        await self._call(
            "POST", f"{name}:modifyAckDeadline", body=request.to_body(), timeout=timeout
        )

    async def subscriptions_modify_push_config(
        self, name: str, request: ModifyPushConfigRequest, timeout: Optional[float] = None
    ) -> None:
        await self._call(
            "POST", f"{name}:modifyPushConfig", body=request.to_body(), timeout=timeout
        )

    async def subscriptions_pull(
        self, name: str, request: PullRequest, timeout: Optional[float] = None
    ) -> PullResponse:
        data = await self._call("POST", f"{name}:pull", body=request.to_body(), timeout=timeout)
        return PullResponse.model_validate(data)

    async def subscriptions_acknowledge(
        self, name: str, request: AcknowledgeRequest, timeout: Optional[float] = None
    ) -> None:
        await self._call("POST", f"{name}:acknowledge", body=request.to_body(), timeout=timeout)

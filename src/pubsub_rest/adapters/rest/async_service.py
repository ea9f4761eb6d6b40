"""Async Pub/Sub service implementing the AsyncPubSubService protocol."""

import logging
from datetime import timedelta
from typing import Optional

import httpx

from pubsub_rest.adapters.rest import mapping
from pubsub_rest.adapters.rest.raw import AsyncRawPubSubApi
from pubsub_rest.config import PubSubSettings
from pubsub_rest.errors import ApiError
from pubsub_rest.models.config import Message, PushConfig, SubscriptionConfig
from pubsub_rest.models.wire import (
    AcknowledgeRequest,
    ModifyAckDeadlineRequest,
    ModifyPushConfigRequest,
    PublishRequest,
    PullRequest,
    Topic,
)

logger = logging.getLogger(__name__)


class AsyncRestPubSubService:
    """
    Async Pub/Sub service backed by the v1 REST API.

    Same behavior as RestPubSubService. Cancelling the awaiting task
    cancels the in-flight request.
    """

    def __init__(self, client: httpx.AsyncClient, owns_client: bool = False):
        self._client = client
        self._owns_client = owns_client
        self._api = AsyncRawPubSubApi(client)

    @classmethod
    def from_settings(
        cls, settings: Optional[PubSubSettings] = None
    ) -> "AsyncRestPubSubService":
        """Build a service with its own httpx.AsyncClient from PUBSUB_* settings."""
        settings = settings or PubSubSettings()
        client = httpx.AsyncClient(**settings.client_options())
        return cls(client, owns_client=True)

    async def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncRestPubSubService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # Subscriptions

    async def create_subscription(
        self,
        topic_name: str,
        sub_name: str,
        ack_deadline: timedelta,
        push_config: Optional[PushConfig] = None,
        timeout: Optional[float] = None,
    ) -> None:
        subscription = mapping.subscription_to_wire(topic_name, ack_deadline, push_config)
        await self._api.subscriptions_create(sub_name, subscription, timeout=timeout)

    async def get_subscription_config(
        self, sub_name: str, timeout: Optional[float] = None
    ) -> SubscriptionConfig:
        subscription = await self._api.subscriptions_get(sub_name, timeout=timeout)
        return mapping.subscription_config_from_wire(subscription)

    async def list_project_subscriptions(
        self, project_name: str, timeout: Optional[float] = None
    ) -> list[str]:
        subs: list[str] = []
        page_token = None
        while True:
            page = await self._api.subscriptions_list(project_name, page_token, timeout=timeout)
            subs.extend(sub.name or "" for sub in page.subscriptions)
            page_token = page.next_page_token
            if not page_token:
                return subs

    async def delete_subscription(self, name: str, timeout: Optional[float] = None) -> None:
        await self._api.subscriptions_delete(name, timeout=timeout)

    async def subscription_exists(self, name: str, timeout: Optional[float] = None) -> bool:
        try:
            await self._api.subscriptions_get(name, timeout=timeout)
        except ApiError as e:
            if e.not_found:
                logger.debug("subscription %s not found", name)
                return False
            raise
        return True

    # Topics

    async def create_topic(self, name: str, timeout: Optional[float] = None) -> None:
        # The API expects a Topic body but ignores it.
        await self._api.topics_create(name, Topic(), timeout=timeout)

    async def delete_topic(self, name: str, timeout: Optional[float] = None) -> None:
        await self._api.topics_delete(name, timeout=timeout)

    async def topic_exists(self, name: str, timeout: Optional[float] = None) -> bool:
        try:
            await self._api.topics_get(name, timeout=timeout)
        except ApiError as e:
            if e.not_found:
                logger.debug("topic %s not found", name)
                return False
            raise
        return True

    async def list_project_topics(
        self, project_name: str, timeout: Optional[float] = None
    ) -> list[str]:
        topics: list[str] = []
        page_token = None
        while True:
            page = await self._api.topics_list(project_name, page_token, timeout=timeout)
            topics.extend(topic.name or "" for topic in page.topics)
            page_token = page.next_page_token
            if not page_token:
                return topics

    async def list_topic_subscriptions(
        self, topic_name: str, timeout: Optional[float] = None
    ) -> list[str]:
        subs: list[str] = []
        page_token = None
        while True:
            page = await self._api.topics_subscriptions_list(
                topic_name, page_token, timeout=timeout
            )
            subs.extend(page.subscriptions)
            page_token = page.next_page_token
            if not page_token:
                return subs

    # Messages

    async def modify_ack_deadline(
        self,
        sub_name: str,
        deadline: timedelta,
        ack_ids: list[str],
        timeout: Optional[float] = None,
    ) -> None:
        request = ModifyAckDeadlineRequest(
            ack_ids=list(ack_ids),
            ack_deadline_seconds=mapping.duration_to_seconds(deadline),
        )
        await self._api.subscriptions_modify_ack_deadline(sub_name, request, timeout=timeout)

    async def modify_push_config(
        self, sub_name: str, push_config: PushConfig, timeout: Optional[float] = None
    ) -> None:
        request = ModifyPushConfigRequest(push_config=mapping.push_config_to_wire(push_config))
        await self._api.subscriptions_modify_push_config(sub_name, request, timeout=timeout)

    async def publish_messages(
        self, topic_name: str, messages: list[Message], timeout: Optional[float] = None
    ) -> list[str]:
        request = PublishRequest(messages=[mapping.message_to_wire(m) for m in messages])
        response = await self._api.topics_publish(topic_name, request, timeout=timeout)
        return response.message_ids

    async def fetch_messages(
        self, sub_name: str, max_messages: int, timeout: Optional[float] = None
    ) -> list[Message]:
        request = PullRequest(return_immediately=False, max_messages=max_messages)
        response = await self._api.subscriptions_pull(sub_name, request, timeout=timeout)
        return [mapping.message_from_wire(m) for m in response.received_messages]

    async def acknowledge(
        self, sub_name: str, ack_ids: list[str], timeout: Optional[float] = None
    ) -> None:
        request = AcknowledgeRequest(ack_ids=list(ack_ids))
        await self._api.subscriptions_acknowledge(sub_name, request, timeout=timeout)

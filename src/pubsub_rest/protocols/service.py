"""Service protocol definitions for topic and subscription lifecycle operations."""

from datetime import timedelta
from typing import Optional, Protocol, runtime_checkable

from pubsub_rest.models.config import Message, PushConfig, SubscriptionConfig


@runtime_checkable
class PubSubService(Protocol):
    """
    Synchronous protocol isolating callers from the remote Pub/Sub API.

    Names are full resource paths, e.g. 'projects/PROJECT_ID/topics/TOPIC_NAME'.
    Every call blocks for one request (or one pagination drain). An optional
    timeout in seconds overrides the transport default for that call.
    """

    def create_subscription(
        self,
        topic_name: str,
        sub_name: str,
        ack_deadline: timedelta,
        push_config: Optional[PushConfig] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Create a subscription bound to a topic.

        Args:
            topic_name: Topic to bind to
            sub_name: Name of the new subscription
            ack_deadline: Acknowledgment deadline (sent as whole seconds)
            push_config: Push delivery settings; None for a pull subscription
            timeout: Per-call timeout in seconds
        """
        ...

    def get_subscription_config(
        self, sub_name: str, timeout: Optional[float] = None
    ) -> SubscriptionConfig:
        """Fetch a subscription's configuration, including its topic name."""
        ...

    def list_project_subscriptions(
        self, project_name: str, timeout: Optional[float] = None
    ) -> list[str]:
        """Names of every subscription in a project ('projects/PROJECT_ID')."""
        ...

    def delete_subscription(self, name: str, timeout: Optional[float] = None) -> None:
        ...

    def subscription_exists(self, name: str, timeout: Optional[float] = None) -> bool:
        """
        Report whether a subscription exists.

        Returns:
            False when the service answers "not found"; any other failure is raised
        """
        ...

    def create_topic(self, name: str, timeout: Optional[float] = None) -> None:
        ...

    def delete_topic(self, name: str, timeout: Optional[float] = None) -> None:
        ...

    def topic_exists(self, name: str, timeout: Optional[float] = None) -> bool:
        """Report whether a topic exists; "not found" yields False rather than an error."""
        ...

    def list_project_topics(self, project_name: str, timeout: Optional[float] = None) -> list[str]:
        """Names of every topic in a project."""
        ...

    def list_topic_subscriptions(
        self, topic_name: str, timeout: Optional[float] = None
    ) -> list[str]:
        """Names of the subscriptions bound to a topic."""
        ...

    def modify_ack_deadline(
        self,
        sub_name: str,
        deadline: timedelta,
        ack_ids: list[str],
        timeout: Optional[float] = None,
    ) -> None:
        """
        Change the acknowledgment deadline of delivered messages.

        Args:
            sub_name: Subscription the messages were pulled from
            deadline: New deadline (sent as whole seconds); zero makes them redeliverable
            ack_ids: Ack IDs of the messages
            timeout: Per-call timeout in seconds
        """
        ...

    def modify_push_config(
        self, sub_name: str, push_config: PushConfig, timeout: Optional[float] = None
    ) -> None:
        """Replace a subscription's push configuration; an empty endpoint switches it to pull."""
        ...

    def publish_messages(
        self, topic_name: str, messages: list[Message], timeout: Optional[float] = None
    ) -> list[str]:
        """
        Publish messages to a topic.

        Returns:
            Message IDs assigned by the service, in the order of the messages
        """
        ...

    def fetch_messages(
        self, sub_name: str, max_messages: int, timeout: Optional[float] = None
    ) -> list[Message]:
        """Pull up to max_messages messages, waiting until at least one is available."""
        ...

    def acknowledge(
        self, sub_name: str, ack_ids: list[str], timeout: Optional[float] = None
    ) -> None:
        ...


@runtime_checkable
class AsyncPubSubService(Protocol):
    """
    Async protocol isolating callers from the remote Pub/Sub API.

    Same operations as PubSubService. Cancelling the awaiting task cancels
    the in-flight request.
    """

    async def create_subscription(
        self,
        topic_name: str,
        sub_name: str,
        ack_deadline: timedelta,
        push_config: Optional[PushConfig] = None,
        timeout: Optional[float] = None,
    ) -> None:
        ...

    async def get_subscription_config(
        self, sub_name: str, timeout: Optional[float] = None
    ) -> SubscriptionConfig:
        ...

    async def list_project_subscriptions(
        self, project_name: str, timeout: Optional[float] = None
    ) -> list[str]:
        ...

    async def delete_subscription(self, name: str, timeout: Optional[float] = None) -> None:
        ...

    async def subscription_exists(self, name: str, timeout: Optional[float] = None) -> bool:
        ...

    async def create_topic(self, name: str, timeout: Optional[float] = None) -> None:
        ...

    async def delete_topic(self, name: str, timeout: Optional[float] = None) -> None:
        ...

    async def topic_exists(self, name: str, timeout: Optional[float] = None) -> bool:
        ...

    async def list_project_topics(
        self, project_name: str, timeout: Optional[float] = None
    ) -> list[str]:
        ...

    async def list_topic_subscriptions(
        self, topic_name: str, timeout: Optional[float] = None
    ) -> list[str]:
        ...

    async def modify_ack_deadline(
        self,
        sub_name: str,
        deadline: timedelta,
        ack_ids: list[str],
        timeout: Optional[float] = None,
    ) -> None:
        ...

    async def modify_push_config(
        self, sub_name: str, push_config: PushConfig, timeout: Optional[float] = None
    ) -> None:
        ...

    async def publish_messages(
        self, topic_name: str, messages: list[Message], timeout: Optional[float] = None
    ) -> list[str]:
        ...

    async def fetch_messages(
        self, sub_name: str, max_messages: int, timeout: Optional[float] = None
    ) -> list[Message]:
        ...

    async def acknowledge(
        self, sub_name: str, ack_ids: list[str], timeout: Optional[float] = None
    ) -> None:
        ...

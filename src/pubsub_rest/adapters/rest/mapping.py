"""Conversions between internal value objects and wire bodies."""

import base64
from datetime import timedelta
from typing import Optional

from pubsub_rest.models import wire
from pubsub_rest.models.config import Message, PushConfig, SubscriptionConfig


def duration_to_seconds(duration: timedelta) -> int:
    """Whole seconds of a duration; fractions are truncated toward zero."""
    return int(duration.total_seconds())


def seconds_to_duration(seconds: Optional[int]) -> timedelta:
    return timedelta(seconds=seconds or 0)


def push_config_to_wire(push_config: PushConfig) -> wire.PushConfig:
    return wire.PushConfig(
        push_endpoint=push_config.endpoint,
        attributes=dict(push_config.attributes),
    )


def push_config_from_wire(push_config: Optional[wire.PushConfig]) -> PushConfig:
    # Pull subscriptions come back with an empty or missing pushConfig.
    if push_config is None:
        return PushConfig()
    return PushConfig(
        endpoint=push_config.push_endpoint or "",
        attributes=dict(push_config.attributes or {}),
    )


def subscription_to_wire(
    topic_name: str, ack_deadline: timedelta, push_config: Optional[PushConfig]
) -> wire.Subscription:
    return wire.Subscription(
        topic=topic_name,
        ack_deadline_seconds=duration_to_seconds(ack_deadline),
        push_config=push_config_to_wire(push_config) if push_config is not None else None,
    )


def subscription_config_from_wire(subscription: wire.Subscription) -> SubscriptionConfig:
    return SubscriptionConfig(
        topic=subscription.topic or "",
        ack_deadline=seconds_to_duration(subscription.ack_deadline_seconds),
        push_config=push_config_from_wire(subscription.push_config),
    )


def message_to_wire(message: Message) -> wire.PubsubMessage:
    return wire.PubsubMessage(
        data=base64.b64encode(message.data).decode("ascii"),
        attributes=dict(message.attributes) or None,
    )


def message_from_wire(received: wire.ReceivedMessage) -> Message:
    msg = received.message
    return Message(
        data=base64.b64decode(msg.data or ""),
        attributes=dict(msg.attributes or {}),
        id=msg.message_id or "",
        ack_id=received.ack_id,
        publish_time=msg.publish_time,
    )

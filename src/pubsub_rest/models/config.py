"""Internal value objects exchanged with callers of the service adapters."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional


@dataclass(frozen=True)
class PushConfig:
    """
    Push delivery configuration of a subscription.

    An empty endpoint means the subscription is pull-only.
    """

    endpoint: str = ""
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SubscriptionConfig:
    """Configuration of an existing subscription."""

    topic: str
    ack_deadline: timedelta
    push_config: PushConfig = field(default_factory=PushConfig)


@dataclass(frozen=True)
class Message:
    """A message to publish, or one delivered by a pull."""

    data: bytes
    attributes: dict[str, str] = field(default_factory=dict)
    # Set by the service; empty on messages built for publishing.
    id: str = ""
    ack_id: str = ""
    publish_time: Optional[datetime] = None

"""Wire-form bodies of the Pub/Sub v1 REST API."""

from datetime import datetime
from typing import Annotated, Optional, TypeVar

from pydantic import BeforeValidator, Field

from pubsub_rest.models.base import CamelCaseModel

T = TypeVar("T")


def _null_as_empty(value):
    return [] if value is None else value


# A list field that also accepts an explicit JSON null.
NullableList = Annotated[list[T], BeforeValidator(_null_as_empty)]


class Topic(CamelCaseModel):
    """A topic resource. The service ignores the body on create."""

    name: Optional[str] = None


class PushConfig(CamelCaseModel):
    """Push delivery settings of a subscription."""

    push_endpoint: Optional[str] = None
    attributes: Optional[dict[str, str]] = None


class Subscription(CamelCaseModel):
    """A subscription resource."""

    name: Optional[str] = None
    topic: Optional[str] = None
    push_config: Optional[PushConfig] = None
    ack_deadline_seconds: Optional[int] = None


class ListTopicsResponse(CamelCaseModel):
    topics: NullableList[Topic] = []
    next_page_token: Optional[str] = None


class ListSubscriptionsResponse(CamelCaseModel):
    subscriptions: NullableList[Subscription] = []
    next_page_token: Optional[str] = None


class ListTopicSubscriptionsResponse(CamelCaseModel):
    """Subscriptions attached to a topic, as bare resource names."""

    subscriptions: NullableList[str] = []
    next_page_token: Optional[str] = None


class ModifyAckDeadlineRequest(CamelCaseModel):
    ack_ids: list[str]
    ack_deadline_seconds: int


class ModifyPushConfigRequest(CamelCaseModel):
    push_config: PushConfig


class PubsubMessage(CamelCaseModel):
    """A message as carried on the wire; data is base64 encoded."""

    data: Optional[str] = None
    attributes: Optional[dict[str, str]] = None
    message_id: Optional[str] = None
    publish_time: Optional[datetime] = None


class PublishRequest(CamelCaseModel):
    messages: list[PubsubMessage]


class PublishResponse(CamelCaseModel):
    message_ids: NullableList[str] = []


class PullRequest(CamelCaseModel):
    return_immediately: bool = False
    max_messages: int


class ReceivedMessage(CamelCaseModel):
    ack_id: str = ""
    message: PubsubMessage = Field(default_factory=PubsubMessage)


class PullResponse(CamelCaseModel):
    received_messages: NullableList[ReceivedMessage] = []


class AcknowledgeRequest(CamelCaseModel):
    ack_ids: list[str]

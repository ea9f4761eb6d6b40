"""REST adapter for the pubsub_rest service protocols."""

from pubsub_rest.adapters.rest.async_service import AsyncRestPubSubService
from pubsub_rest.adapters.rest.raw import AsyncRawPubSubApi, RawPubSubApi
from pubsub_rest.adapters.rest.service import RestPubSubService

__all__ = ["AsyncRawPubSubApi", "AsyncRestPubSubService", "RawPubSubApi", "RestPubSubService"]

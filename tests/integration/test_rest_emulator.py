"""Integration tests for RestPubSubService against the Pub/Sub emulator."""

import uuid
from datetime import timedelta

import pytest

from pubsub_rest.models.config import Message, PushConfig

PROJECT = "projects/pubsub-rest-test"


@pytest.mark.integration
class TestTopics:
    """Integration tests for topic lifecycle."""

    def test_created_topic_exists_and_is_listed(self, pubsub_service, test_topic):
        """A created topic is reported by topic_exists() and list_project_topics()."""
        assert pubsub_service.topic_exists(test_topic) is True
        assert test_topic in pubsub_service.list_project_topics(PROJECT)

    def test_missing_topic_does_not_exist(self, pubsub_service):
        """topic_exists() returns False for an unknown topic."""
        assert pubsub_service.topic_exists(f"{PROJECT}/topics/missing-{uuid.uuid4()}") is False

    def test_deleted_topic_no_longer_exists(self, pubsub_service):
        name = f"{PROJECT}/topics/deleted-{uuid.uuid4()}"
        pubsub_service.create_topic(name)

        pubsub_service.delete_topic(name)

        assert pubsub_service.topic_exists(name) is False


@pytest.mark.integration
class TestSubscriptions:
    """Integration tests for subscription lifecycle and message flow."""

    @pytest.fixture
    def test_subscription(self, pubsub_service, test_topic):
        """Create a pull subscription on the test topic."""
        name = f"{PROJECT}/subscriptions/test-sub-{uuid.uuid4()}"
        pubsub_service.create_subscription(test_topic, name, timedelta(seconds=20))

        yield name

        if pubsub_service.subscription_exists(name):
            pubsub_service.delete_subscription(name)

    def test_subscription_config_round_trips(self, pubsub_service, test_topic, test_subscription):
        """The config read back matches what was created."""
        config = pubsub_service.get_subscription_config(test_subscription)

        assert config.topic == test_topic
        assert config.ack_deadline == timedelta(seconds=20)
        assert config.push_config == PushConfig()

    def test_subscription_is_listed(self, pubsub_service, test_topic, test_subscription):
        assert test_subscription in pubsub_service.list_project_subscriptions(PROJECT)
        assert pubsub_service.list_topic_subscriptions(test_topic) == [test_subscription]

    def test_publish_fetch_acknowledge(self, pubsub_service, test_topic, test_subscription):
        """A published message is delivered by a pull and can be acknowledged."""
        ids = pubsub_service.publish_messages(
            test_topic, [Message(data=b"hello world", attributes={"k": "v"})]
        )

        messages = pubsub_service.fetch_messages(test_subscription, max_messages=1)

        assert len(messages) == 1
        assert messages[0].id == ids[0]
        assert messages[0].data == b"hello world"
        assert messages[0].attributes == {"k": "v"}

        pubsub_service.modify_ack_deadline(
            test_subscription, timedelta(seconds=30), [messages[0].ack_id]
        )
        pubsub_service.acknowledge(test_subscription, [messages[0].ack_id])

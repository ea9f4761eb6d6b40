"""Fixtures for Pub/Sub emulator integration tests."""

import subprocess
import time
import uuid

import httpx
import pytest

from pubsub_rest.adapters.rest import RestPubSubService
from pubsub_rest.config import PubSubSettings

EMULATOR_PORT = 8686  # Non-default port to avoid conflicts
EMULATOR_IMAGE = "gcr.io/google.com/cloudsdktool/google-cloud-cli:emulators"
PROJECT = "projects/pubsub-rest-test"


@pytest.fixture(scope="session")
def pubsub_emulator():
    """Start the Pub/Sub emulator Docker container for the test session."""
    container_name = "pubsub-rest-emulator-test"

    # Clean up any existing container
    subprocess.run(["docker", "rm", "-f", container_name], capture_output=True)

    subprocess.run(
        [
            "docker",
            "run",
            "-d",
            "--name",
            container_name,
            "-p",
            f"{EMULATOR_PORT}:8085",
            EMULATOR_IMAGE,
            "gcloud",
            "beta",
            "emulators",
            "pubsub",
            "start",
            "--host-port=0.0.0.0:8085",
        ],
        check=True,
        capture_output=True,
    )

    endpoint = f"http://localhost:{EMULATOR_PORT}/"
    deadline = time.monotonic() + 60
    while time.monotonic() < deadline:
        try:
            httpx.get(endpoint, timeout=1.0)
            break
        except httpx.TransportError:
            time.sleep(1)

    yield endpoint

    # Cleanup
    subprocess.run(["docker", "stop", container_name], capture_output=True)
    subprocess.run(["docker", "rm", container_name], capture_output=True)


@pytest.fixture(scope="session")
def pubsub_service(pubsub_emulator):
    """Provide a service talking to the emulator (no auth)."""
    settings = PubSubSettings(endpoint=pubsub_emulator, timeout=10.0)
    service = RestPubSubService.from_settings(settings)
    yield service
    service.close()


@pytest.fixture
def test_topic(pubsub_service) -> str:
    """Create a unique topic and clean up after the test."""
    name = f"{PROJECT}/topics/test-topic-{uuid.uuid4()}"
    pubsub_service.create_topic(name)

    yield name

    if pubsub_service.topic_exists(name):
        pubsub_service.delete_topic(name)

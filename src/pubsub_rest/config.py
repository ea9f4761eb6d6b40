"""Connection settings for the Pub/Sub REST adapters."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://pubsub.googleapis.com/"


class PubSubSettings(BaseSettings):
    """
    Pub/Sub client configuration loaded from PUBSUB_* environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="PUBSUB_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 30.0  # seconds
    # OAuth2 bearer token. Omit when the emulator or an injected client handles auth.
    access_token: Optional[str] = None
    user_agent: str = "pubsub-rest"

    def client_options(self) -> dict:
        """Keyword arguments for building an httpx client from these settings."""
        headers = {"User-Agent": self.user_agent}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return {
            "base_url": self.endpoint,
            "timeout": self.timeout,
            "headers": headers,
        }

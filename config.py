"""
Configuration management for the fire report bot.

Loads environment variables from .env file and provides typed access to configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file (absent in production)
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


@dataclass
class WhatsAppConfig:
    """WhatsApp Cloud API and server configuration."""

    # Webhook subscription
    verify_token: str

    # Cloud API credentials
    access_token: str
    phone_number_id: str

    # Server
    port: int = 8080
    environment: str = "development"

    # Cloud API endpoint
    api_version: str = "v24.0"
    graph_url: str = "https://graph.facebook.com"
    send_timeout: float = 30.0

    REQUIRED = ("verify_token", "access_token", "phone_number_id")

    @classmethod
    def from_env(cls) -> "WhatsAppConfig":
        """Load configuration from environment variables."""
        return cls(
            verify_token=os.getenv("VERIFY_TOKEN", ""),
            access_token=os.getenv("ACCESS_TOKEN", ""),
            phone_number_id=os.getenv("PHONE_NUMBER_ID", ""),
            port=int(os.getenv("PORT") or "8080"),
            environment=os.getenv("ENVIRONMENT", "development"),
            api_version=os.getenv("WHATSAPP_API_VERSION", "v24.0"),
            graph_url=os.getenv("WHATSAPP_GRAPH_URL", "https://graph.facebook.com"),
            send_timeout=float(os.getenv("WHATSAPP_SEND_TIMEOUT", "30")),
        )

    @property
    def messages_url(self) -> str:
        """Cloud API endpoint for sending messages from our phone number."""
        return f"{self.graph_url.rstrip('/')}/{self.api_version}/{self.phone_number_id}/messages"

    def missing(self) -> List[str]:
        """Names of required settings that are empty."""
        return [name for name in self.REQUIRED if not getattr(self, name)]

    def validate(self) -> bool:
        """Validate that required configuration is set."""
        return not self.missing()


def get_config() -> WhatsAppConfig:
    """Get process configuration from the environment."""
    return WhatsAppConfig.from_env()


if __name__ == "__main__":
    # Test configuration loading
    config = get_config()
    print("Configuration loaded:")
    print(f"  Verify Token: {'✓ Set' if config.verify_token else '✗ Missing'}")
    print(f"  Access Token: {'✓ Set' if config.access_token else '✗ Missing'}")
    print(f"  Phone Number ID: {config.phone_number_id or '✗ Missing'}")
    print(f"  Port: {config.port}")
    print(f"  Messages URL: {config.messages_url}")
    print(f"\n  Validation: {'✓ PASSED' if config.validate() else '✗ FAILED'}")

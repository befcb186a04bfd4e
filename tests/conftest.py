"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import WhatsAppConfig  # noqa: E402


def build_webhook_payload(message=None, statuses=None):
    """WhatsApp webhook envelope around one message and/or status list."""
    value = {"messaging_product": "whatsapp"}
    if message is not None:
        value["messages"] = [message]
    if statuses is not None:
        value["statuses"] = statuses
    return {
        "object": "whatsapp_business_account",
        "entry": [{
            "id": "WABA_ID",
            "changes": [{
                "field": "messages",
                "value": value,
            }],
        }],
    }


def text_message(sender="27821234567", body="Hello"):
    return {
        "from": sender,
        "id": "wamid.text",
        "timestamp": "1707500000",
        "type": "text",
        "text": {"body": body},
    }


def button_message(sender="27821234567", button_id="report-reply", title="Report a fire"):
    return {
        "from": sender,
        "id": "wamid.button",
        "timestamp": "1707500000",
        "type": "interactive",
        "interactive": {
            "type": "button_reply",
            "button_reply": {"id": button_id, "title": title},
        },
    }


def location_message(sender="27821234567", latitude=-34.046814, longitude=19.58392):
    return {
        "from": sender,
        "id": "wamid.location",
        "timestamp": "1707500000",
        "type": "location",
        "location": {"latitude": latitude, "longitude": longitude},
    }


@pytest.fixture
def whatsapp_config():
    return WhatsAppConfig(
        verify_token="verify-me",
        access_token="test-access-token",
        phone_number_id="123456789",
    )

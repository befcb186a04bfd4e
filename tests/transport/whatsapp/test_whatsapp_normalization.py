"""
WhatsApp Input Normalization Tests

Test conversion of WhatsApp webhook payloads to conversation InboundEvents.
"""

import pytest

from conftest import (
    build_webhook_payload,
    button_message,
    location_message,
    text_message,
)
from conversation.events import (
    ButtonEvent,
    ButtonId,
    LocationEvent,
    TextEvent,
    UnsupportedEvent,
)
from transport.whatsapp.normalize import (
    NormalizationError,
    extract_statuses,
    is_status_update,
    normalize_message,
)
from transport.whatsapp.schemas import WhatsAppWebhookPayload

STATUSES = [{
    "id": "wamid.sent",
    "status": "delivered",
    "timestamp": "1707500001",
    "recipient_id": "27821234567",
}]


class TestNormalizationText:
    """Test text message normalization."""

    def test_normalize_text_message(self):
        """Text message normalizes correctly."""
        event = normalize_message(build_webhook_payload(text_message(body="Hello bot")))

        assert event == TextEvent(sender_id="27821234567", body="Hello bot")

    def test_normalize_text_trims_whitespace(self):
        """Text is trimmed but not otherwise changed."""
        event = normalize_message(build_webhook_payload(text_message(body="  Menu  \n\t ")))

        assert event.body == "Menu"

    def test_normalize_text_keeps_case(self):
        event = normalize_message(build_webhook_payload(text_message(body="MENU")))

        assert event.body == "MENU"

    def test_accepts_pydantic_payload(self):
        payload = WhatsAppWebhookPayload(**build_webhook_payload(text_message()))

        assert isinstance(normalize_message(payload), TextEvent)


class TestNormalizationInteractive:
    """Test button reply normalization."""

    def test_normalize_button_reply(self):
        event = normalize_message(build_webhook_payload(
            button_message(button_id="donate-reply", title="Donate money")
        ))

        assert isinstance(event, ButtonEvent)
        assert event.sender_id == "27821234567"
        assert event.raw_id == "donate-reply"
        assert event.title == "Donate money"
        assert event.button_id is ButtonId.DONATE

    def test_unknown_button_id_kept_raw(self):
        event = normalize_message(build_webhook_payload(button_message(button_id="old-button")))

        assert isinstance(event, ButtonEvent)
        assert event.button_id is None

    def test_list_reply_is_unsupported(self):
        message = {
            "from": "27821234567",
            "id": "wamid.list",
            "type": "interactive",
            "interactive": {
                "type": "list_reply",
                "list_reply": {"id": "row-1", "title": "Row"},
            },
        }

        event = normalize_message(build_webhook_payload(message))

        assert event == UnsupportedEvent(
            sender_id="27821234567", message_type="interactive/list_reply"
        )


class TestNormalizationLocation:
    """Test location normalization."""

    def test_normalize_location(self):
        event = normalize_message(build_webhook_payload(
            location_message(latitude=-34.046814, longitude=19.58392)
        ))

        assert event == LocationEvent(
            sender_id="27821234567", latitude=-34.046814, longitude=19.58392
        )
        assert event.formatted() == "-34.046814,19.583920"

    def test_location_with_place_details(self):
        message = location_message()
        message["location"].update({"name": "Greyton", "address": "Main Rd"})

        event = normalize_message(build_webhook_payload(message))

        assert isinstance(event, LocationEvent)


class TestNormalizationUnsupported:
    """Well-formed messages the dialogue does not understand."""

    @pytest.mark.parametrize("message_type", ["image", "audio", "sticker", "contacts"])
    def test_other_types_are_unsupported_events(self, message_type):
        message = {
            "from": "27821234567",
            "id": "wamid.other",
            "type": message_type,
            message_type: {"id": "media-id"},
        }

        event = normalize_message(build_webhook_payload(message))

        assert event == UnsupportedEvent(sender_id="27821234567", message_type=message_type)


class TestStatusUpdates:
    """Delivery/read receipts produce no event."""

    def test_status_only_payload(self):
        payload = build_webhook_payload(statuses=STATUSES)

        assert is_status_update(payload)
        assert [s.status for s in extract_statuses(payload)] == ["delivered"]

    def test_status_payload_has_no_message(self):
        with pytest.raises(NormalizationError):
            normalize_message(build_webhook_payload(statuses=STATUSES))

    def test_message_payload_is_not_status_update(self):
        assert not is_status_update(build_webhook_payload(text_message()))
        assert extract_statuses(build_webhook_payload(text_message())) == []

    def test_malformed_payload_is_not_status_update(self):
        assert not is_status_update({"entry": "nope"})
        assert extract_statuses({"entry": "nope"}) == []

    def test_invalid_status_entries_skipped(self):
        payload = build_webhook_payload(statuses=[{"status": "read"}] + STATUSES)

        assert [s.id for s in extract_statuses(payload)] == ["wamid.sent"]


class TestNormalizationErrors:
    """Test error handling."""

    @pytest.mark.parametrize("payload", [
        {"invalid": "structure"},
        {"entry": []},
        {"entry": [{"changes": []}]},
        {"entry": [{"changes": [{"value": "text"}]}]},
        {"entry": "not a list"},
        [],
        "string",
        None,
    ])
    def test_invalid_payload_structure(self, payload):
        """Invalid payload raises NormalizationError."""
        with pytest.raises(NormalizationError):
            normalize_message(payload)

    def test_missing_messages(self):
        """Empty messages raises NormalizationError."""
        payload = build_webhook_payload()
        payload["entry"][0]["changes"][0]["value"]["messages"] = []

        with pytest.raises(NormalizationError):
            normalize_message(payload)

    def test_missing_sender(self):
        message = text_message()
        del message["from"]

        with pytest.raises(NormalizationError):
            normalize_message(build_webhook_payload(message))

    def test_missing_text_body(self):
        """Missing text.body raises NormalizationError."""
        message = text_message()
        message["text"] = {}

        with pytest.raises(NormalizationError):
            normalize_message(build_webhook_payload(message))

    def test_text_type_without_text_object(self):
        message = text_message()
        del message["text"]

        with pytest.raises(NormalizationError):
            normalize_message(build_webhook_payload(message))

    def test_interactive_without_payload(self):
        message = button_message()
        del message["interactive"]

        with pytest.raises(NormalizationError):
            normalize_message(build_webhook_payload(message))

    def test_location_with_bad_coordinates(self):
        message = location_message()
        message["location"] = {"latitude": "north", "longitude": 19.5}

        with pytest.raises(NormalizationError):
            normalize_message(build_webhook_payload(message))

    @pytest.mark.parametrize("latitude,longitude", [
        (float("nan"), 19.5),
        (-34.0, float("inf")),
        (float("-inf"), 19.5),
        ("-34.046814", 19.58392),
        (-34.046814, "Infinity"),
        (-91.0, 19.5),
        (-34.0, 180.5),
    ])
    def test_location_rejects_non_numeric_or_out_of_range(self, latitude, longitude):
        """Only finite JSON numbers within range become locations."""
        message = location_message(latitude=latitude, longitude=longitude)

        with pytest.raises(NormalizationError):
            normalize_message(build_webhook_payload(message))

    def test_location_accepts_integer_coordinates(self):
        event = normalize_message(build_webhook_payload(location_message(latitude=-34, longitude=19)))

        assert event.formatted() == "-34.000000,19.000000"

    def test_location_without_payload(self):
        message = location_message()
        del message["location"]

        with pytest.raises(NormalizationError):
            normalize_message(build_webhook_payload(message))


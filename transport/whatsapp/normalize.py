"""
WhatsApp Input Normalization

PURE CONVERSION - NO STATE, NO I/O

Converts WhatsApp webhook payloads into conversation InboundEvents.
- TEXT: Extract body, trim
- INTERACTIVE button_reply: Extract button id and title
- LOCATION: Extract latitude/longitude
- Anything else well-formed: UnsupportedEvent, so the dialogue can re-prompt

The conversation core never knows the source was WhatsApp.
"""

from typing import Any, List

from pydantic import ValidationError

from conversation.events import (
    ButtonEvent,
    InboundEvent,
    LocationEvent,
    TextEvent,
    UnsupportedEvent,
)

from .schemas import MessageObject, MessageStatusChange, WhatsAppWebhookPayload


class NormalizationError(Exception):
    """Input normalization failed."""
    pass


def _first_value(payload: Any) -> dict:
    """Return entry[0].changes[0].value of a webhook payload."""
    if isinstance(payload, WhatsAppWebhookPayload):
        payload = payload.model_dump()

    try:
        value = payload["entry"][0]["changes"][0]["value"]
    except (KeyError, IndexError, TypeError) as e:
        raise NormalizationError(f"Invalid payload structure: {e!r}")

    if not isinstance(value, dict):
        raise NormalizationError("Invalid payload structure: 'value' is not an object")
    return value


def is_status_update(payload: Any) -> bool:
    """
    True if the payload only reports delivery/read statuses.

    Status updates carry no message content and produce no event.
    """
    try:
        value = _first_value(payload)
    except NormalizationError:
        return False
    return bool(value.get("statuses")) and not value.get("messages")


def extract_statuses(payload: Any) -> List[MessageStatusChange]:
    """Parse status entries of a payload, skipping ones that don't validate."""
    try:
        raw_statuses = _first_value(payload).get("statuses") or []
    except NormalizationError:
        return []

    if not isinstance(raw_statuses, list):
        return []

    statuses = []
    for raw in raw_statuses:
        try:
            statuses.append(MessageStatusChange.model_validate(raw))
        except ValidationError:
            continue
    return statuses


def normalize_message(payload: Any) -> InboundEvent:
    """
    Convert a WhatsApp webhook payload into an InboundEvent.

    Only the first message of the first change is used.

    Args:
        payload: Raw WhatsApp webhook payload

    Returns:
        InboundEvent for the conversation engine

    Raises:
        NormalizationError: Malformed payload or no message in it
    """
    value = _first_value(payload)

    messages = value.get("messages")
    if not messages or not isinstance(messages, list):
        raise NormalizationError("No messages in payload")

    try:
        message = MessageObject.model_validate(messages[0])
    except ValidationError as e:
        raise NormalizationError(f"Invalid message: {e.error_count()} validation error(s)")

    if message.type == "text":
        return _normalize_text_message(message)

    elif message.type == "interactive":
        return _normalize_interactive_message(message)

    elif message.type == "location":
        return _normalize_location_message(message)

    else:
        return UnsupportedEvent(sender_id=message.from_, message_type=message.type)


def _normalize_text_message(message: MessageObject) -> TextEvent:
    """Text message: trim whitespace, no other processing."""
    if message.text is None:
        raise NormalizationError("Text message missing 'text.body'")

    return TextEvent(sender_id=message.from_, body=message.text.body.strip())


def _normalize_interactive_message(message: MessageObject) -> InboundEvent:
    """
    Interactive message.

    Only reply buttons are part of the dialogue; list replies and other
    interactive kinds are passed on as unsupported.
    """
    interactive = message.interactive
    if interactive is None:
        raise NormalizationError("Interactive message missing 'interactive' object")

    if interactive.type != "button_reply" or interactive.button_reply is None:
        return UnsupportedEvent(
            sender_id=message.from_,
            message_type=f"interactive/{interactive.type}",
        )

    return ButtonEvent(
        sender_id=message.from_,
        raw_id=interactive.button_reply.id,
        title=interactive.button_reply.title,
    )


def _normalize_location_message(message: MessageObject) -> LocationEvent:
    if message.location is None:
        raise NormalizationError("Location message missing 'location' object")

    return LocationEvent(
        sender_id=message.from_,
        latitude=message.location.latitude,
        longitude=message.location.longitude,
    )


"""
WhatsApp Response Sender

Sends conversation replies back to WhatsApp.
No formatting intelligence. No retries. No logic.
"""

import logging
from typing import Optional

import httpx

from config import WhatsAppConfig, get_config
from conversation.messages import OutboundMessage

from .render import render_message
from .schemas import WhatsAppMessageResponse

logger = logging.getLogger(__name__)


class WhatsAppSenderError(Exception):
    """Failed to send response to WhatsApp."""
    pass


class WhatsAppTransportError(WhatsAppSenderError):
    """The request never got a response (DNS, connect, timeout, ...)."""
    pass


class WhatsAppRemoteError(WhatsAppSenderError):
    """WhatsApp answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"WhatsApp API returned {status_code}: {body}")


async def send_message(
    message: OutboundMessage,
    config: Optional[WhatsAppConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> WhatsAppMessageResponse:
    """
    Send a reply to its recipient via WhatsApp Cloud API.

    No branching on content, no retries.
    If WhatsApp fails → log and raise.

    Args:
        message: Outbound message (recipient included)
        config: WhatsApp configuration (defaults to environment)
        client: Optional shared httpx client; a short-lived one is used otherwise

    Returns:
        WhatsAppMessageResponse from Meta API

    Raises:
        WhatsAppTransportError: Network failure
        WhatsAppRemoteError: Non-2xx response (status and body attached)
        WhatsAppSenderError: Missing credentials or unreadable response
    """

    config = config or get_config()

    if not config.access_token:
        raise WhatsAppSenderError("ACCESS_TOKEN not configured")
    if not config.phone_number_id:
        raise WhatsAppSenderError("PHONE_NUMBER_ID not configured")

    payload = render_message(message)

    headers = {
        "Authorization": f"Bearer {config.access_token}",
        "Content-Type": "application/json"
    }

    # Send (no retries)
    try:
        if client is not None:
            response = await client.post(
                config.messages_url,
                json=payload,
                headers=headers,
                timeout=config.send_timeout,
            )
        else:
            async with httpx.AsyncClient() as owned_client:
                response = await owned_client.post(
                    config.messages_url,
                    json=payload,
                    headers=headers,
                    timeout=config.send_timeout,
                )
    except httpx.RequestError as e:
        logger.error(
            f"HTTP request failed: {e}",
            extra={
                "recipient": message.to,
                "error": str(e),
            }
        )
        raise WhatsAppTransportError(f"HTTP request failed: {e}") from e

    if not response.is_success:
        error_text = response.text
        logger.error(
            f"WhatsApp API error: {response.status_code} - {error_text}",
            extra={
                "status_code": response.status_code,
                "error_body": error_text,
            }
        )
        raise WhatsAppRemoteError(response.status_code, error_text)

    try:
        result = WhatsAppMessageResponse(**response.json())
    except (ValueError, TypeError) as e:
        raise WhatsAppSenderError(f"Unreadable WhatsApp response: {e}") from e

    logger.info(
        f"Response sent to {message.to}",
        extra={
            "recipient": message.to,
            "message_type": payload["type"],
            "response_id": result.message_id,
        }
    )

    return result

"""
WhatsApp Webhook Receiver

FastAPI router that receives WhatsApp deliveries, advances the sender's
conversation and sends the reply.

Every delivery is acknowledged with 200 so WhatsApp does not redeliver:
malformed payloads and send failures are logged, never raised.
"""

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from config import WhatsAppConfig, get_config
from conversation.handler import handle_event
from conversation.store import InMemoryStateStore, StateStore

from .normalize import NormalizationError, extract_statuses, is_status_update, normalize_message
from .security import verify_webhook_challenge
from .sender import WhatsAppRemoteError, WhatsAppSenderError, send_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook", tags=["WhatsApp Transport"])

ACK = {"status": "ok"}

# Conversation store (initialized once per process)
_state_store: Optional[StateStore] = None


def get_state_store() -> StateStore:
    """Get or create the process state store (singleton)."""
    global _state_store
    if _state_store is None:
        _state_store = InMemoryStateStore()
    return _state_store


def get_whatsapp_config() -> WhatsAppConfig:
    return get_config()


# ============================================================================
# WEBHOOK CHALLENGE (Setup only)
# ============================================================================

@router.get("", response_class=PlainTextResponse)
async def whatsapp_webhook_challenge(
    hub_mode: str = Query("", alias="hub.mode"),
    hub_challenge: str = Query("", alias="hub.challenge"),
    hub_verify_token: str = Query("", alias="hub.verify_token"),
    config: WhatsAppConfig = Depends(get_whatsapp_config),
) -> str:
    """
    Verify webhook subscription challenge from Meta.

    Returns:
        The challenge string (plain text)

    Raises:
        HTTPException(400): Invalid mode
        HTTPException(403): Invalid token
    """
    logger.info("Received verification request")
    return verify_webhook_challenge(
        hub_mode, hub_challenge, hub_verify_token, expected_token=config.verify_token
    )


# ============================================================================
# WEBHOOK RECEIVER (Message processing)
# ============================================================================

@router.post("")
async def whatsapp_webhook_receiver(
    request: Request,
    store: StateStore = Depends(get_state_store),
    config: WhatsAppConfig = Depends(get_whatsapp_config),
) -> dict[str, str]:
    """
    Receive WhatsApp deliveries via webhook.

    Flow:
    1. Parse raw JSON
    2. Skip status updates (delivered/read)
    3. Normalize first message to an InboundEvent
    4. Advance the conversation under the store lock
    5. Send the reply (at most once, no retries)

    Returns:
        {"status": "ok"} always
    """

    # Step 1: Parse body
    body = await request.body()
    try:
        payload = json.loads(body)
    except ValueError as e:
        logger.warning(f"Dropping webhook with invalid JSON: {e}")
        return ACK

    # Step 2: Delivery/read receipts carry no message
    if is_status_update(payload):
        statuses = extract_statuses(payload)
        logger.info(
            f"Status update received: {', '.join(s.status for s in statuses) or 'unknown'}",
            extra={"message_ids": [s.id for s in statuses]},
        )
        return ACK

    # Step 3: Normalize to an inbound event
    try:
        event = normalize_message(payload)
    except NormalizationError as e:
        logger.warning(f"Dropping malformed webhook: {e}")
        return ACK

    logger.info(
        f"Message received from {event.sender_id}",
        extra={
            "sender_id": event.sender_id,
            "event_type": type(event).__name__,
        }
    )

    # Step 4: Advance conversation (state stays mutated even if sending fails)
    reply = handle_event(store, event)

    # Step 5: Send reply
    try:
        await send_message(reply, config=config)
    except WhatsAppRemoteError as e:
        logger.error(
            f"Failed to send reply to {event.sender_id}: WhatsApp returned {e.status_code}",
            extra={"sender_id": event.sender_id, "status_code": e.status_code, "error_body": e.body},
        )
    except WhatsAppSenderError as e:
        logger.error(
            f"Failed to send reply to {event.sender_id}: {e}",
            extra={"sender_id": event.sender_id},
        )

    return ACK

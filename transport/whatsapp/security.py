"""
WhatsApp Webhook Verification

SECURITY BOUNDARY - static shared verify token only.
No conversation imports. No retries. No logic.
"""

import hmac
import logging
from typing import Optional

from fastapi import HTTPException, status

from config import get_config

logger = logging.getLogger(__name__)


def verify_webhook_challenge(
    hub_mode: str,
    hub_challenge: str,
    hub_verify_token: str,
    expected_token: Optional[str] = None,
) -> str:
    """
    Verify webhook subscription challenge from WhatsApp.

    WhatsApp calls GET /webhook with:
    - hub.mode=subscribe
    - hub.challenge=random_string
    - hub.verify_token=configured_token

    We verify the token and echo back the challenge.

    Args:
        hub_mode: Should be "subscribe"
        hub_challenge: Random string to echo back
        hub_verify_token: Token to verify
        expected_token: Configured token (defaults to VERIFY_TOKEN)

    Returns:
        The challenge string to echo back

    Raises:
        HTTPException(400): Invalid mode
        HTTPException(403): Invalid or unconfigured token
    """

    if expected_token is None:
        expected_token = get_config().verify_token

    if hub_mode != "subscribe":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid hub.mode"
        )

    # An unset token must never verify
    if not expected_token or not hmac.compare_digest(
        hub_verify_token.encode("utf-8"), expected_token.encode("utf-8")
    ):
        logger.warning("Webhook verification rejected: token mismatch")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid hub.verify_token"
        )

    logger.info("Webhook verification successful")
    return hub_challenge

"""WhatsApp Transport Layer - Module Exports"""

from .normalize import (
    NormalizationError,
    extract_statuses,
    is_status_update,
    normalize_message,
)
from .render import render_message, to_payload
from .schemas import (
    MessageObject,
    MessageStatusChange,
    WhatsAppMessageResponse,
    WhatsAppWebhookPayload,
)
from .security import verify_webhook_challenge
from .sender import (
    WhatsAppRemoteError,
    WhatsAppSenderError,
    WhatsAppTransportError,
    send_message,
)
from .webhook import get_state_store, get_whatsapp_config, router

__all__ = [
    # Schemas
    "WhatsAppWebhookPayload",
    "MessageObject",
    "MessageStatusChange",
    "WhatsAppMessageResponse",
    # Normalization
    "normalize_message",
    "is_status_update",
    "extract_statuses",
    "NormalizationError",
    # Rendering
    "render_message",
    "to_payload",
    # Security
    "verify_webhook_challenge",
    # Sender
    "send_message",
    "WhatsAppSenderError",
    "WhatsAppTransportError",
    "WhatsAppRemoteError",
    # Router
    "router",
    "get_state_store",
    "get_whatsapp_config",
]

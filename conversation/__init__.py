"""
Conversation core - Module Exports

Transport-independent dialogue: state, events, messages, engine, store.
"""

from .engine import advance
from .events import (
    ButtonEvent,
    ButtonId,
    InboundEvent,
    LocationEvent,
    TextEvent,
    UnsupportedEvent,
)
from .handler import handle_event
from .messages import (
    ButtonMenu,
    LocationRequest,
    OutboundMessage,
    ReplyButton,
    TextMessage,
    UrlAction,
)
from .state import ConversationState, Step
from .store import InMemoryStateStore, StateStore

__all__ = [
    # State
    "ConversationState",
    "Step",
    # Events
    "InboundEvent",
    "TextEvent",
    "ButtonEvent",
    "ButtonId",
    "LocationEvent",
    "UnsupportedEvent",
    # Messages
    "OutboundMessage",
    "TextMessage",
    "ButtonMenu",
    "ReplyButton",
    "LocationRequest",
    "UrlAction",
    # Engine
    "advance",
    "handle_event",
    # Store
    "StateStore",
    "InMemoryStateStore",
]

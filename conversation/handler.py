"""
Conversation handler.

Runs the engine for one inbound event inside the store's atomic section.
Sending the reply is the caller's job and happens after the lock is released.
"""

from conversation.engine import advance
from conversation.events import InboundEvent
from conversation.messages import OutboundMessage
from conversation.store import StateStore


def handle_event(store: StateStore, event: InboundEvent) -> OutboundMessage:
    """
    Advance the sender's conversation by one event.

    Args:
        store: State store holding the sender's conversation
        event: Normalized inbound event

    Returns:
        The message to send back to the sender
    """
    with store.session(event.sender_id) as state:
        message, _ = advance(state, event)
    return message

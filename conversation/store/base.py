"""
Abstract state store interface.

The webhook depends only on this interface, so the in-memory store can be
swapped for a persistent or sharded one without touching the engine.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional

from conversation.state import ConversationState


class StateStore(ABC):
    """
    Sender id -> ConversationState mapping.

    Key properties:
    - Exactly one state per sender id; creation never races
    - session() holds the store lock for the whole read-modify-write
    """

    @abstractmethod
    def get_or_create(self, sender_id: str) -> ConversationState:
        """
        Return the sender's state, creating it at Step.INITIAL if absent.

        The returned reference must only be mutated inside session().
        """
        raise NotImplementedError

    @abstractmethod
    def session(self, sender_id: str) -> AbstractContextManager:
        """
        Atomically get-or-create the sender's state and lock it.

        Usage:
            with store.session(sender_id) as state:
                message, state = advance(state, event)
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, sender_id: str) -> Optional[ConversationState]:
        """Return the sender's state without creating it."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Forget every conversation."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

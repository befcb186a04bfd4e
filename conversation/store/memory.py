"""
In-memory state store.

Process-lifetime only: conversations are lost on restart.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from conversation.state import ConversationState
from conversation.store.base import StateStore

logger = logging.getLogger(__name__)


class InMemoryStateStore(StateStore):
    """
    Dict of conversations guarded by one exclusive lock.

    The same lock covers creation and the caller's read-modify-write, so two
    deliveries for one sender are strictly ordered. Deliveries for different
    senders contend on the lock but never see each other's state.
    """

    def __init__(self):
        self._states: Dict[str, ConversationState] = {}
        self._lock = threading.Lock()

    def _get_or_create_locked(self, sender_id: str) -> ConversationState:
        state = self._states.get(sender_id)
        if state is None:
            state = ConversationState()
            self._states[sender_id] = state
            logger.info(f"New conversation for {sender_id}", extra={"sender_id": sender_id})
        return state

    def get_or_create(self, sender_id: str) -> ConversationState:
        with self._lock:
            return self._get_or_create_locked(sender_id)

    @contextmanager
    def session(self, sender_id: str) -> Iterator[ConversationState]:
        with self._lock:
            yield self._get_or_create_locked(sender_id)

    def get(self, sender_id: str) -> Optional[ConversationState]:
        with self._lock:
            return self._states.get(sender_id)

    def clear(self) -> None:
        with self._lock:
            self._states.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)

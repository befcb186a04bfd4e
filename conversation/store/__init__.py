"""State store exports."""

from .base import StateStore
from .memory import InMemoryStateStore

__all__ = [
    "StateStore",
    "InMemoryStateStore",
]

"""
Conversation state schema.

ConversationState is the single source of truth for where a sender is in the
dialogue. It is mutated only by the engine, and only while the state store's
lock is held.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class Step(str, Enum):
    """Position in the dialogue, in order of progression."""

    INITIAL = "initial"
    MENU = "menu"
    REPORT = "report"
    DONATE = "donate"
    DONE = "done"


LOCATION_KEY = "location"


@dataclass
class ConversationState:
    """
    Per-sender conversation state.

    Invariants:
    - step starts at INITIAL and only the engine moves it
    - details holds collected answers (currently only "location")
    """

    step: Step = Step.INITIAL
    details: Dict[str, str] = field(default_factory=dict)

    @property
    def location(self):
        """Reported location as "lat,lon", or None."""
        return self.details.get(LOCATION_KEY)

"""
Inbound events.

Classified, transport-independent form of one incoming message.
The engine never sees provider JSON, only these types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ButtonId(str, Enum):
    """Reply button identifiers the bot sends and understands."""

    REPORT = "report-reply"
    DONATE = "donate-reply"
    CONTACTS = "contacts-reply"
    EFT = "eft-reply"
    SNAPSCAN = "snapscan-id"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["ButtonId"]:
        """Map a raw button id to a known identifier, or None if unknown."""
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass(frozen=True)
class TextEvent:
    """Plain text message."""

    sender_id: str
    body: str


@dataclass(frozen=True)
class ButtonEvent:
    """Reply button selection."""

    sender_id: str
    raw_id: str
    title: str = ""

    @property
    def button_id(self) -> Optional[ButtonId]:
        return ButtonId.parse(self.raw_id)


@dataclass(frozen=True)
class LocationEvent:
    """Shared location pin."""

    sender_id: str
    latitude: float
    longitude: float

    def formatted(self) -> str:
        """Fixed-point "lat,lon" with six decimals."""
        return f"{self.latitude:.6f},{self.longitude:.6f}"


@dataclass(frozen=True)
class UnsupportedEvent:
    """Well-formed message of a kind the dialogue does not handle (image, audio, ...)."""

    sender_id: str
    message_type: str


InboundEvent = Union[TextEvent, ButtonEvent, LocationEvent, UnsupportedEvent]

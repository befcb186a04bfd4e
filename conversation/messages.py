"""
Outbound messages.

One frozen dataclass per message kind. Transports render these into their
own wire format; nothing here knows about JSON.
"""

from dataclasses import dataclass
from typing import Tuple, Union

MIN_MENU_BUTTONS = 2
MAX_MENU_BUTTONS = 3


@dataclass(frozen=True)
class ReplyButton:
    """Single quick-reply button."""

    id: str
    title: str


@dataclass(frozen=True)
class TextMessage:
    to: str
    body: str


@dataclass(frozen=True)
class ButtonMenu:
    """Body text with 2 to 3 reply buttons."""

    to: str
    body: str
    buttons: Tuple[ReplyButton, ...]

    def __post_init__(self):
        if not MIN_MENU_BUTTONS <= len(self.buttons) <= MAX_MENU_BUTTONS:
            raise ValueError(
                f"ButtonMenu needs {MIN_MENU_BUTTONS}-{MAX_MENU_BUTTONS} buttons; "
                f"got {len(self.buttons)}"
            )


@dataclass(frozen=True)
class LocationRequest:
    """Prompt with a "Send location" action."""

    to: str
    body: str


@dataclass(frozen=True)
class UrlAction:
    """Call-to-action button opening a URL."""

    to: str
    body: str
    display_text: str
    url: str


OutboundMessage = Union[TextMessage, ButtonMenu, LocationRequest, UrlAction]

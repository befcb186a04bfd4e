"""
WhatsApp Output Rendering

Converts conversation OutboundMessages into Cloud API JSON bodies.
One branch per message kind; an unknown kind is a programming error.
"""

from conversation.messages import (
    ButtonMenu,
    LocationRequest,
    OutboundMessage,
    TextMessage,
    UrlAction,
)

from .schemas import (
    ButtonsAction,
    CtaUrlAction,
    CtaUrlParameters,
    Interactive,
    InteractiveBody,
    InteractivePayload,
    LocationRequestAction,
    OutboundPayload,
    ReplyButtonPayload,
    ReplyButtonValue,
    TextBody,
    TextPayload,
)


def to_payload(message: OutboundMessage) -> OutboundPayload:
    """Build the typed Cloud API payload for a message."""
    if isinstance(message, TextMessage):
        return TextPayload(to=message.to, text=TextBody(body=message.body))

    if isinstance(message, ButtonMenu):
        interactive = Interactive(
            type="button",
            body=InteractiveBody(text=message.body),
            action=ButtonsAction(buttons=[
                ReplyButtonPayload(reply=ReplyButtonValue(id=button.id, title=button.title))
                for button in message.buttons
            ]),
        )
    elif isinstance(message, LocationRequest):
        interactive = Interactive(
            type="location_request_message",
            body=InteractiveBody(text=message.body),
            action=LocationRequestAction(),
        )
    elif isinstance(message, UrlAction):
        interactive = Interactive(
            type="cta_url",
            body=InteractiveBody(text=message.body),
            action=CtaUrlAction(parameters=CtaUrlParameters(
                display_text=message.display_text,
                url=message.url,
            )),
        )
    else:
        raise TypeError(f"Unsupported outbound message: {type(message).__name__}")

    return InteractivePayload(to=message.to, interactive=interactive)


def render_message(message: OutboundMessage) -> dict:
    """JSON-ready dict for POST /{phone_number_id}/messages."""
    return to_payload(message).model_dump()

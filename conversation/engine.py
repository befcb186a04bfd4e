"""
Conversation engine.

PURE STATE MACHINE - NO I/O

advance() maps (current step, inbound event) to (outbound message, state).
Every (step, event kind) pair has a defined result: input the current step
does not understand re-prompts instead of raising.

The only side effect is writing state.step and state.details, so callers
must hold the state store lock around advance().
"""

import logging
from typing import Tuple

from conversation import prompts
from conversation.events import ButtonEvent, ButtonId, InboundEvent, LocationEvent, TextEvent
from conversation.messages import OutboundMessage
from conversation.state import LOCATION_KEY, ConversationState, Step

logger = logging.getLogger(__name__)


def advance(
    state: ConversationState,
    event: InboundEvent,
) -> Tuple[OutboundMessage, ConversationState]:
    """
    Apply one inbound event to a conversation.

    Args:
        state: Sender's current state (mutated in place)
        event: Normalized inbound event

    Returns:
        (message to send back, the same state object after the transition)
    """
    handler = _STEP_HANDLERS[state.step]
    previous = state.step
    message = handler(state, event)

    if state.step is not previous:
        logger.debug(
            f"Conversation {event.sender_id}: {previous.value} -> {state.step.value}",
            extra={"sender_id": event.sender_id},
        )

    return message, state


def _pressed(event: InboundEvent):
    """Button identifier for button events, None for anything else."""
    if isinstance(event, ButtonEvent):
        return event.button_id
    return None


def _on_initial(state: ConversationState, event: InboundEvent) -> OutboundMessage:
    state.step = Step.MENU
    return prompts.start_menu(event.sender_id, welcome=True)


def _on_menu(state: ConversationState, event: InboundEvent) -> OutboundMessage:
    to = event.sender_id
    button = _pressed(event)

    if button is ButtonId.REPORT:
        state.step = Step.REPORT
        return prompts.location_request(to)

    if button is ButtonId.DONATE:
        state.step = Step.DONATE
        return prompts.donation_menu(to)

    if button is ButtonId.CONTACTS:
        state.step = Step.DONE
        return prompts.text(to, prompts.CONTACTS_INFO)

    return prompts.start_menu(to)


def _on_report(state: ConversationState, event: InboundEvent) -> OutboundMessage:
    to = event.sender_id

    if isinstance(event, LocationEvent):
        state.details[LOCATION_KEY] = event.formatted()
        state.step = Step.DONE
        logger.info(
            f"Fire reported by {to} at {state.details[LOCATION_KEY]}",
            extra={"sender_id": to, "location": state.details[LOCATION_KEY]},
        )
        return prompts.text(to, prompts.REPORT_RECEIVED)

    return prompts.location_request(to, explicit=True)


def _on_donate(state: ConversationState, event: InboundEvent) -> OutboundMessage:
    to = event.sender_id
    button = _pressed(event)

    if button is ButtonId.EFT:
        state.step = Step.DONE
        return prompts.text(to, prompts.DONATION_BANKING_DETAILS)

    if button is ButtonId.SNAPSCAN:
        state.step = Step.DONE
        return prompts.snapscan_link(to)

    return prompts.donation_menu(to)


def _on_done(state: ConversationState, event: InboundEvent) -> OutboundMessage:
    to = event.sender_id

    if isinstance(event, TextEvent) and event.body.casefold() == prompts.RESET_KEYWORD:
        state.step = Step.MENU
        state.details.pop(LOCATION_KEY, None)
        return prompts.start_menu(to)

    return prompts.text(to, prompts.START_MENU_HINT)


_STEP_HANDLERS = {
    Step.INITIAL: _on_initial,
    Step.MENU: _on_menu,
    Step.REPORT: _on_report,
    Step.DONATE: _on_donate,
    Step.DONE: _on_done,
}

"""
WhatsApp Transport Layer - Pydantic Schemas

PURE DATA MODELS - NO LOGIC
Only defines the contract between the WhatsApp Cloud API and the conversation core.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field


# ============================================================================
# WHATSAPP WEBHOOK PAYLOAD SCHEMAS (INPUT)
# ============================================================================

# JSON numbers only: no quoted numbers, NaN or Infinity
Latitude = Annotated[float, Field(strict=True, allow_inf_nan=False, ge=-90, le=90)]
Longitude = Annotated[float, Field(strict=True, allow_inf_nan=False, ge=-180, le=180)]


class TextBody(BaseModel):
    """{"body": "..."}"""
    body: str


class ButtonReply(BaseModel):
    """Reply button the user tapped."""
    id: str
    title: str = ""


class InteractiveReply(BaseModel):
    """Interactive reply (button_reply, list_reply, ...)."""
    type: str
    button_reply: Optional[ButtonReply] = None


class LocationPayload(BaseModel):
    """Location pin shared by the user."""
    latitude: Latitude
    longitude: Longitude
    name: Optional[str] = None
    address: Optional[str] = None
    url: Optional[str] = None


class MessageObject(BaseModel):
    """A single WhatsApp message."""
    from_: str = Field(..., alias="from")
    id: Optional[str] = None
    timestamp: Optional[str] = None
    type: str

    text: Optional[TextBody] = None
    interactive: Optional[InteractiveReply] = None
    location: Optional[LocationPayload] = None

    class Config:
        populate_by_name = True
        extra = "allow"  # image, audio, contacts, ...


class MessageStatusChange(BaseModel):
    """Message status update (delivery, read, etc)."""
    id: str
    status: str
    timestamp: Optional[str] = None
    recipient_id: Optional[str] = None


class WhatsAppWebhookPayload(BaseModel):
    """
    Full WhatsApp webhook payload.

    ref: https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/payload-example
    """

    object: str = Field(..., description="Always 'whatsapp_business_account'")
    entry: list[dict] = Field(..., description="Webhook entries")

    class Config:
        extra = "allow"  # WhatsApp may add fields


# ============================================================================
# WHATSAPP SEND API PAYLOADS (OUTPUT)
# ============================================================================

class InteractiveBody(BaseModel):
    text: str


class ReplyButtonValue(BaseModel):
    id: str
    title: str


class ReplyButtonPayload(BaseModel):
    type: Literal["reply"] = "reply"
    reply: ReplyButtonValue


class ButtonsAction(BaseModel):
    buttons: list[ReplyButtonPayload]


class LocationRequestAction(BaseModel):
    name: Literal["send_location"] = "send_location"


class CtaUrlParameters(BaseModel):
    display_text: str
    url: str


class CtaUrlAction(BaseModel):
    name: Literal["cta_url"] = "cta_url"
    parameters: CtaUrlParameters


class Interactive(BaseModel):
    type: Literal["button", "location_request_message", "cta_url"]
    body: InteractiveBody
    action: Union[ButtonsAction, LocationRequestAction, CtaUrlAction]


class OutboundPayload(BaseModel):
    """Fields shared by every message sent via the Cloud API."""
    messaging_product: Literal["whatsapp"] = "whatsapp"
    recipient_type: Literal["individual"] = "individual"
    to: str


class TextPayload(OutboundPayload):
    type: Literal["text"] = "text"
    text: TextBody


class InteractivePayload(OutboundPayload):
    type: Literal["interactive"] = "interactive"
    interactive: Interactive


# ============================================================================
# WHATSAPP API RESPONSE (OUTPUT)
# ============================================================================

class WhatsAppMessageResponse(BaseModel):
    """Response from WhatsApp Cloud API when sending a message."""

    messaging_product: str = Field(default="whatsapp")
    contacts: list[dict[str, Any]] = Field(default_factory=list)  # [{"input": "1234567890", "wa_id": "1234567890"}]
    messages: list[dict[str, Any]] = Field(default_factory=list)  # [{"id": "wamid.xxx"}]

    @property
    def message_id(self) -> Optional[str]:
        if not self.messages:
            return None
        return self.messages[0].get("id")

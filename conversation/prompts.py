"""
Dialogue text and message builders.

All user-facing wording lives here so the engine only decides *which*
message to send.
"""

from conversation.events import ButtonId
from conversation.messages import ButtonMenu, LocationRequest, ReplyButton, TextMessage, UrlAction

START_MENU_WELCOME = "Welcome!"
START_MENU_INFO = "Please select an option below to proceed."
START_MENU_HINT = "To start again reply 'Menu'."

RESET_KEYWORD = "menu"

CONTACTS_INFO = "Here are the contacts."

REPORT_INFO = "To report a fire, please send the location."
REPORT_INFO_EXPLICIT = "Please use the 'Send location' button to report the fire."
REPORT_RECEIVED = "Thank you, report received"

DONATION_INFO = "Please select one of the options provided to make a donation."
DONATION_BANKING_DETAILS = (
    "To make an EFT please use the following banking details:\n\n"
    "FNB\n"
    "Greyton Volunteer Firefighters NPC\n"
    "Account Number - 63131550287\n"
    "Branch Code - 200212\n\n"
    "Please use your name and surname as reference."
)
DONATION_SNAPSCAN_INFO = "To make a donation with SnapScan please follow the link provided."
DONATION_SNAPSCAN_LABEL = "SnapScan"
DONATION_SNAPSCAN_URL = "https://pos.snapscan.io/qr/U_F7xasA"

START_MENU_BUTTONS = (
    ReplyButton(ButtonId.REPORT.value, "Report a fire"),
    ReplyButton(ButtonId.DONATE.value, "Donate money"),
    ReplyButton(ButtonId.CONTACTS.value, "Emergency numbers"),
)

DONATION_BUTTONS = (
    ReplyButton(ButtonId.EFT.value, "EFT"),
    ReplyButton(ButtonId.SNAPSCAN.value, DONATION_SNAPSCAN_LABEL),
)


def start_menu(to: str, welcome: bool = False) -> ButtonMenu:
    body = f"{START_MENU_WELCOME} {START_MENU_INFO}" if welcome else START_MENU_INFO
    return ButtonMenu(to=to, body=body, buttons=START_MENU_BUTTONS)


def donation_menu(to: str) -> ButtonMenu:
    return ButtonMenu(to=to, body=DONATION_INFO, buttons=DONATION_BUTTONS)


def location_request(to: str, explicit: bool = False) -> LocationRequest:
    return LocationRequest(to=to, body=REPORT_INFO_EXPLICIT if explicit else REPORT_INFO)


def snapscan_link(to: str) -> UrlAction:
    return UrlAction(
        to=to,
        body=DONATION_SNAPSCAN_INFO,
        display_text=DONATION_SNAPSCAN_LABEL,
        url=DONATION_SNAPSCAN_URL,
    )


def text(to: str, body: str) -> TextMessage:
    return TextMessage(to=to, body=body)

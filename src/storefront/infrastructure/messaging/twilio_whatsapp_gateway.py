"""WhatsApp notifications through Twilio's REST API.

Sends the rendered order message from the store's Twilio WhatsApp
sender to the admin's number.  Every failure, including missing
configuration, surfaces as NotifyError.
"""

from __future__ import annotations

import logging

import requests

from storefront.domain.exceptions import NotifyError
from storefront.domain.gateway.notification_gateway import NotificationGateway
from storefront.domain.model.notification import OrderNotification
from storefront.infrastructure.config import TwilioSettings

logger = logging.getLogger(__name__)

MESSAGES_URL = "https://api.twilio.com/2010-04-01/Accounts/{sid}/Messages.json"

# Twilio error codes worth a clearer message than the API's own.
KNOWN_ERRORS = {
    21211: "Invalid phone number format",
    21608: "Twilio WhatsApp not enabled",
}


class TwilioWhatsAppGateway(NotificationGateway):

    def __init__(
        self,
        settings: TwilioSettings,
        session: requests.Session | None = None,
    ) -> None:
        self._settings = settings
        self._session = session or requests.Session()

    def notify(self, notification: OrderNotification) -> str:
        s = self._settings
        if not s.account_sid or not s.auth_token:
            raise NotifyError("Twilio credentials not configured")
        if not s.from_number or not s.admin_number:
            raise NotifyError("WhatsApp numbers not configured")

        try:
            response = self._session.post(
                MESSAGES_URL.format(sid=s.account_sid),
                data={
                    "From": _whatsapp_address(s.from_number),
                    "To": _whatsapp_address(s.admin_number),
                    "Body": notification.render(),
                },
                auth=(s.account_sid, s.auth_token),
                timeout=s.timeout,
            )
        except requests.RequestException as exc:
            raise NotifyError(f"Could not reach Twilio: {exc}") from exc

        payload = _json_or_empty(response)
        if response.status_code >= 400:
            code = payload.get("code")
            message = KNOWN_ERRORS.get(code) or payload.get("message") or (
                f"Twilio responded with HTTP {response.status_code}"
            )
            raise NotifyError(message)

        message_id = payload.get("sid", "")
        logger.debug("WhatsApp message %s queued for order %s", message_id, notification.order_id)
        return message_id


def _whatsapp_address(number: str) -> str:
    number = number.strip()
    return number if number.startswith("whatsapp:") else f"whatsapp:{number}"


def _json_or_empty(response: requests.Response) -> dict:
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}

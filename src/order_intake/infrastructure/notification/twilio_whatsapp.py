"""Twilio WhatsApp implementation of Notifier."""

from __future__ import annotations

import httpx

from order_intake.domain.exceptions import NotificationError
from order_intake.domain.notification.notifier import Notifier

API_BASE = "https://api.twilio.com/2010-04-01"


def _whatsapp(number: str) -> str:
    return number if number.startswith("whatsapp:") else f"whatsapp:{number}"


class TwilioWhatsAppNotifier(Notifier):

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        from_number: str,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = f"{API_BASE}/Accounts/{account_sid}/Messages.json"
        self._auth = (account_sid, auth_token)
        self._from = _whatsapp(from_number)
        self._client = client or httpx.Client()

    def send(self, recipient: str, body: str) -> str:
        form = {"From": self._from, "To": _whatsapp(recipient), "Body": body}
        try:
            response = self._client.post(self._url, data=form, auth=self._auth)
            response.raise_for_status()
            return response.json()["sid"]
        except httpx.HTTPStatusError as exc:
            raise NotificationError(
                f"Twilio returned HTTP {exc.response.status_code}: {exc.response.text}"
            ) from exc
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            raise NotificationError(f"Twilio request failed: {exc}") from exc

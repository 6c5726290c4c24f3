"""JSON request handler for order submissions.

Framework-agnostic: takes the HTTP method and raw body, returns status,
headers and a JSON-serializable payload.  ``wsgi.py`` adapts it to WSGI.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field

from order_intake.application.dto import SubmissionOutcome
from order_intake.application.submit_order import SubmitOrderHandler
from order_intake.domain.model.order import OrderRequest
from order_intake.domain.model.value_objects import Quantity
from order_intake.infrastructure.web.notices import render_notice, to_wire_errors

logger = logging.getLogger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

INVALID_BODY_MESSAGE = "Invalid order data provided"
UNEXPECTED_FAILURE_MESSAGE = "Failed to process order"


class BadRequest(Exception):
    """The request body is not a usable order submission."""


@dataclass(frozen=True)
class HttpResponse:
    status: int
    payload: dict | None = None
    headers: dict[str, str] = field(default_factory=dict)

    def body(self) -> bytes:
        if self.payload is None:
            return b""
        return json.dumps(self.payload, ensure_ascii=False).encode("utf-8")


def parse_order_request(body: bytes | str | dict) -> OrderRequest:
    """Read ``{"orderData": {...}}`` into an OrderRequest.

    Field values are passed through untouched; validation happens later.
    """
    if isinstance(body, (bytes, str)):
        try:
            body = json.loads(body or "null")
        except ValueError as exc:
            raise BadRequest(INVALID_BODY_MESSAGE) from exc
    if not isinstance(body, dict):
        raise BadRequest(INVALID_BODY_MESSAGE)

    data = body.get("orderData")
    if not isinstance(data, dict):
        raise BadRequest(INVALID_BODY_MESSAGE)

    return OrderRequest(
        customer_name=data.get("customerName"),
        phone_number=data.get("phoneNumber"),
        address=data.get("address"),
        items=data.get("items"),
        quantity=data.get("quantity", Quantity.DEFAULT),
    )


class SubmitOrderEndpoint:

    def __init__(self, handler: SubmitOrderHandler) -> None:
        self._handler = handler

    def handle(self, method: str, body: bytes | str | dict = b"") -> HttpResponse:
        method = method.upper()
        if method == "OPTIONS":
            return self._respond(200, None)
        if method != "POST":
            return self._respond(405, {"success": False, "message": "Method not allowed"})

        try:
            raw = parse_order_request(body)
            result = self._handler.handle(raw)
        except BadRequest as exc:
            return self._respond(400, {"success": False, "message": str(exc)})
        except Exception:
            logger.exception("Error in submit-order handler")
            return self._respond(500, {"success": False, "message": UNEXPECTED_FAILURE_MESSAGE})

        notice = render_notice(result).to_dict()

        if result.is_success:
            return self._respond(200, {
                "success": True,
                "order": asdict(result.order),
                "notification": "sent" if result.notification_sent else "failed",
                "notice": notice,
            })
        if result.outcome == SubmissionOutcome.VALIDATION_FAILURE:
            return self._respond(422, {
                "success": False,
                "message": result.message,
                "errors": to_wire_errors(result.field_errors),
                "notice": notice,
            })
        return self._respond(500, {"success": False, "message": result.message, "notice": notice})

    @staticmethod
    def _respond(status: int, payload: dict | None) -> HttpResponse:
        headers = dict(CORS_HEADERS)
        if payload is not None:
            headers["Content-Type"] = "application/json"
        return HttpResponse(status=status, payload=payload, headers=headers)

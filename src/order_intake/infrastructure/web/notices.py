"""Turn a SubmissionResult into the notice shown to the customer."""

from __future__ import annotations

from dataclasses import dataclass, field

from order_intake.application.dto import SubmissionOutcome, SubmissionResult

# Python field name -> form field name on the wire
WIRE_FIELDS: dict[str, str] = {
    "customer_name": "customerName",
    "phone_number": "phoneNumber",
    "address": "address",
    "items": "items",
    "quantity": "quantity",
}


@dataclass(frozen=True)
class Notice:
    kind: str  # "success" | "warning" | "field_errors" | "error"
    title: str
    description: str
    field_errors: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = {"kind": self.kind, "title": self.title, "description": self.description}
        if self.field_errors:
            data["fieldErrors"] = dict(self.field_errors)
        return data


def to_wire_errors(field_errors: dict[str, str]) -> dict[str, str]:
    return {WIRE_FIELDS.get(name, name): message for name, message in field_errors.items()}


def render_notice(result: SubmissionResult) -> Notice:
    if result.outcome == SubmissionOutcome.SUCCESS:
        return Notice(
            kind="success",
            title="Order Submitted!",
            description="Your order has been received. We'll contact you shortly.",
        )
    if result.outcome == SubmissionOutcome.DEGRADED_NOTIFICATION:
        # The customer still sees a success; only the wording is softer.
        return Notice(
            kind="warning",
            title="Order Submitted!",
            description=(
                "Your order has been received. Our team may take a little "
                "longer than usual to contact you."
            ),
        )
    if result.outcome == SubmissionOutcome.VALIDATION_FAILURE:
        return Notice(
            kind="field_errors",
            title="Please check your details",
            description="Some fields need your attention.",
            field_errors=to_wire_errors(result.field_errors),
        )
    return Notice(
        kind="error",
        title="Order not submitted",
        description="Something went wrong while placing your order. Please try again.",
    )

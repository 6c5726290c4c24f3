"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the presentation and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timezone
from enum import Enum

from order_intake.domain.model.order import StoredOrder

CREATED_AT_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a stored order as displayed to the user."""

    id: int
    customer_name: str
    phone_number: str
    address: str
    items: str
    quantity: int
    created_at: str  # formatted, e.g. "2024-03-01 14:05 UTC"

    @staticmethod
    def from_stored(order: StoredOrder) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer_name,
            phone_number=order.phone_number,
            address=order.address,
            items=order.items,
            quantity=order.quantity.value,
            created_at=order.created_at.astimezone(timezone.utc).strftime(CREATED_AT_FORMAT),
        )


class SubmissionOutcome(Enum):
    SUCCESS = "SUCCESS"
    DEGRADED_NOTIFICATION = "DEGRADED_NOTIFICATION"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"
    STORAGE_FAILURE = "STORAGE_FAILURE"


@dataclass(frozen=True)
class SubmissionResult:
    """Output: what happened to one submission.

    Use the factory methods; each outcome fills only the fields it needs.
    """

    outcome: SubmissionOutcome
    order: OrderDTO | None = None
    field_errors: dict[str, str] = field(default_factory=dict)
    message: str | None = None

    @property
    def is_success(self) -> bool:
        """True when the order was recorded, whether or not the alert went out."""
        return self.outcome in (
            SubmissionOutcome.SUCCESS,
            SubmissionOutcome.DEGRADED_NOTIFICATION,
        )

    @property
    def notification_sent(self) -> bool:
        return self.outcome == SubmissionOutcome.SUCCESS

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def success(order: OrderDTO) -> SubmissionResult:
        return SubmissionResult(SubmissionOutcome.SUCCESS, order=order)

    @staticmethod
    def degraded(order: OrderDTO, warning: str) -> SubmissionResult:
        return SubmissionResult(
            SubmissionOutcome.DEGRADED_NOTIFICATION, order=order, message=warning
        )

    @staticmethod
    def invalid(field_errors: dict[str, str]) -> SubmissionResult:
        return SubmissionResult(
            SubmissionOutcome.VALIDATION_FAILURE,
            field_errors=dict(field_errors),
            message="Please correct the highlighted fields",
        )

    @staticmethod
    def storage_failed(message: str) -> SubmissionResult:
        return SubmissionResult(SubmissionOutcome.STORAGE_FAILURE, message=message)

"""Order model: what the customer submitted, what passed validation,
and what the order store recorded.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from order_intake.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class OrderRequest:
    """Raw form submission.

    Values are taken as the presentation layer collected them, so any field
    may be ``None``, blank, or (for quantity) non-numeric text.
    """

    customer_name: str | None = None
    phone_number: str | None = None
    address: str | None = None
    items: str | None = None
    quantity: object = Quantity.DEFAULT


@dataclass(frozen=True)
class ValidatedOrder:
    """An order request that passed every field rule and is safe to persist.

    Build it through ``order_intake.domain.validation.validate()``.
    """

    customer_name: str
    phone_number: str
    address: str
    items: str
    quantity: Quantity


@dataclass(frozen=True)
class StoredOrder:
    """An order the store accepted.

    The ``id`` and ``created_at`` are assigned by the store; the remaining
    fields echo the validated input.
    """

    id: int
    customer_name: str
    phone_number: str
    address: str
    items: str
    quantity: Quantity
    created_at: datetime

    @staticmethod
    def from_validated(order: ValidatedOrder, order_id: int, created_at: datetime) -> StoredOrder:
        return StoredOrder(
            id=order_id,
            customer_name=order.customer_name,
            phone_number=order.phone_number,
            address=order.address,
            items=order.items,
            quantity=order.quantity,
            created_at=created_at,
        )

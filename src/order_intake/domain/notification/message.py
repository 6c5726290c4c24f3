"""Plain-text alert sent to the administrator for each new order."""

from __future__ import annotations

from datetime import datetime, timezone

from order_intake.domain.model.order import StoredOrder, ValidatedOrder

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


def format_order_message(
    order: ValidatedOrder | StoredOrder,
    submitted_at: datetime | None = None,
) -> str:
    """Build the admin alert for *order*.

    The timestamp is *submitted_at*, else the stored order's creation time,
    else now.
    """
    if submitted_at is None:
        if isinstance(order, StoredOrder):
            submitted_at = order.created_at
        else:
            submitted_at = datetime.now(timezone.utc)
    if submitted_at.tzinfo is not None:
        submitted_at = submitted_at.astimezone(timezone.utc)

    return (
        "📦 New Order Received!\n"
        "\n"
        f"👤 Customer: {order.customer_name}\n"
        f"📞 Phone: {order.phone_number}\n"
        f"📍 Address: {order.address}\n"
        f"🛒 Items: {order.items}\n"
        f"🔢 Quantity: {order.quantity}\n"
        "\n"
        f"Order received on: {submitted_at.strftime(TIMESTAMP_FORMAT)}"
    )

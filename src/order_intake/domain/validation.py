"""Field rules for incoming order requests.

Pure functions, no I/O.  Every field is checked on each call so the form
can annotate all problems at once.
"""

from __future__ import annotations

from order_intake.domain.exceptions import OrderValidationError
from order_intake.domain.model.order import OrderRequest, ValidatedOrder
from order_intake.domain.model.value_objects import Quantity

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MIN_LENGTHS: dict[str, int] = {
    "customer_name": 2,
    "phone_number": 6,
    "address": 5,
    "items": 3,
}

FIELD_LABELS: dict[str, str] = {
    "customer_name": "Name",
    "phone_number": "Phone number",
    "address": "Delivery address",
    "items": "Items",
}


def _clean(value: str | None) -> str:
    if value is None:
        return ""
    return str(value).strip()


def collect_errors(raw: OrderRequest) -> dict[str, str]:
    """Return ``{field: message}`` for every text field that breaks a rule.

    Quantity never appears here: invalid quantities fall back to 1.
    """
    errors: dict[str, str] = {}
    for field_name, min_length in MIN_LENGTHS.items():
        value = _clean(getattr(raw, field_name))
        label = FIELD_LABELS[field_name]
        if not value:
            errors[field_name] = f"{label} is required"
        elif len(value) < min_length:
            errors[field_name] = f"{label} must be at least {min_length} characters"
    return errors


def validate(raw: OrderRequest) -> ValidatedOrder:
    """Check *raw* against all field rules.

    Raises ``OrderValidationError`` carrying every failing field.
    """
    errors = collect_errors(raw)
    if errors:
        raise OrderValidationError(errors)

    return ValidatedOrder(
        customer_name=_clean(raw.customer_name),
        phone_number=_clean(raw.phone_number),
        address=_clean(raw.address),
        items=_clean(raw.items),
        quantity=Quantity.lenient(raw.quantity),
    )

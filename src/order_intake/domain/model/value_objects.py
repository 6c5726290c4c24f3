"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from order_intake.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    Form input goes through ``Quantity.lenient()`` which falls back to
    ``Quantity.DEFAULT`` instead of rejecting the submission.
    """

    value: int

    DEFAULT = 1

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def lenient(raw: object) -> Quantity:
        """Coerce raw form input, defaulting to 1 when it is not a positive integer.

        Whole numbers are accepted whether they arrive as int, float or text,
        so ``2``, ``2.0`` and ``"2.0"`` all give 2.  Fractions, blanks, booleans
        and anything non-numeric fall back to 1.
        """
        if isinstance(raw, bool) or raw is None:
            return Quantity(Quantity.DEFAULT)
        if isinstance(raw, int):
            value = raw
        else:
            text = str(raw).strip()
            try:
                value = int(text)
            except ValueError:
                try:
                    number = float(text)
                except ValueError:
                    return Quantity(Quantity.DEFAULT)
                if not number.is_integer():
                    return Quantity(Quantity.DEFAULT)
                value = int(number)
        if value <= 0:
            return Quantity(Quantity.DEFAULT)
        return Quantity(value)

"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError

MAX_AMOUNT = Decimal("999999999999.99")
MAX_DECIMAL_PLACES = 2


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that prices like 999.99 compare and render exactly.
    Amounts are capped at MAX_AMOUNT and MAX_DECIMAL_PLACES, which keeps
    them within the digits a float (and so a JSON number) holds exactly.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Price cannot be negative, got {self.amount}"
            )
        if self.amount > MAX_AMOUNT:
            raise ValidationError(f"Price cannot exceed {MAX_AMOUNT}, got {self.amount}")
        if self.amount.normalize().as_tuple().exponent < -MAX_DECIMAL_PLACES:
            raise ValidationError(
                f"Price cannot have more than {MAX_DECIMAL_PLACES} decimal places, got {self.amount}"
            )

    # --- Comparison -----------------------------------------------------------

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

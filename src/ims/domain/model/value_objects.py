"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from ims.domain.exceptions import InvalidPriceError, InvalidQuantityError

CENT = Decimal("0.01")

# Extra significant digits kept when dividing, so rounding to cents only
# happens once.
_GUARD_DIGITS = 30


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable when prices are summed and averaged.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidPriceError(
                f"Price must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidPriceError(f"Price must be a finite number, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidPriceError("Price cannot be negative")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        low = min(self.amount.as_tuple().exponent, other.amount.as_tuple().exponent, 0)
        high = max(self.amount.adjusted(), other.amount.adjusted(), 0)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, high - low + 2)
            return Money(self.amount + other.amount)

    def average_over(self, count: int) -> Decimal:
        """Divide by *count* and round half-up to whole cents.

        An empty population averages to exactly zero.
        """
        if count <= 0:
            return Decimal("0").quantize(CENT)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, self.amount.adjusted() + _GUARD_DIGITS)
            return (self.amount / count).quantize(CENT, rounding=ROUND_HALF_UP)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise InvalidPriceError(f"Invalid price: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidPriceError(f"Invalid price: {amount!r}") from exc


def check_quantity(value: int) -> int:
    """Return *value* unchanged if it is a valid stock quantity."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidQuantityError(
            f"Quantity must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidQuantityError("Quantity cannot be negative")
    return value

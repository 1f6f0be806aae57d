"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import InvalidQuantity, ValidationError

_CENT = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Money:
    """Monetary amount in minor currency units (cents).

    Stored as an integer so prices never pick up floating-point
    rounding errors. Displayed as major units with two decimals.
    """

    cents: int

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise ValidationError(
                f"Money amount must be an integer number of cents, "
                f"got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.cents}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor)

    # --- Display --------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        """Major-unit amount, e.g. 149999 cents -> Decimal('1499.99')."""
        return Decimal(self.cents) / 100

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Build Money from a major-unit amount such as ``"1499.99"``.

        Amounts with more than two decimals are rounded half-up to the cent.
        """
        try:
            major = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not major.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            cents = (major.quantize(_CENT, rounding=ROUND_HALF_UP) * 100).to_integral_value()
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(int(cents))

    @staticmethod
    def zero() -> Money:
        return Money(0)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot price zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantity(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise InvalidQuantity(f"Quantity must be positive, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)

"""Money and Quantity, the two value types every price and cart line uses.

Both are frozen and validate on construction, so a negative price or a
zero-unit cart line cannot be represented at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CURRENCY = "INR"
_SYMBOLS = {"INR": "₹"}
_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """A non-negative Decimal amount in a single currency.

    A float never enters a price: ``Money.of`` refuses them and the
    constructor only takes Decimal.
    """

    amount: Decimal
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money needs a Decimal amount, not {type(self.amount).__name__}"
            )
        if not self.amount.is_finite() or self.amount.is_signed() and self.amount != 0:
            raise ValidationError(f"Price cannot be negative or infinite: {self.amount}")

    @classmethod
    def zero(cls) -> Money:
        return cls(Decimal("0"))

    @classmethod
    def of(cls, amount: str | int | Decimal) -> Money:
        """Build Money from user input (``"40"``, ``"12.50"``, ``40``).

        The result is held to whole paise, so every stored amount prints
        exactly as it is summed.

        Floats are refused: ``Money.of(0.1)`` would silently carry the
        binary rounding error into every total built from it.
        """
        if isinstance(amount, (float, bool)):
            raise ValidationError(f"Invalid money amount: {amount!r} (pass a string)")
        try:
            value = Decimal(str(amount).strip())
            cents = value.quantize(_CENT)
        except InvalidOperation as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if cents != value:
            raise ValidationError(
                f"Invalid money amount: {amount!r} (at most two decimal places)"
            )
        return cls(cents)

    def __add__(self, other: Money) -> Money:
        if other.currency != self.currency:
            raise ValidationError(f"Cannot add {other.currency} to {self.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, units: int) -> Money:
        if isinstance(units, bool) or not isinstance(units, int):
            raise TypeError(f"Money can only be scaled by a unit count, got {units!r}")
        return Money(self.amount * units, self.currency)

    def __str__(self) -> str:
        symbol = _SYMBOLS.get(self.currency, f"{self.currency} ")
        return f"{symbol}{self.amount:.2f}"


@dataclass(frozen=True)
class Quantity:
    """Units of one product on a cart or order line (always >= 1)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(f"Quantity must be an integer, got {self.value!r}")
        if self.value < 1:
            raise ValidationError(f"Quantity must be positive, got {self.value}")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __int__(self) -> int:
        return self.value

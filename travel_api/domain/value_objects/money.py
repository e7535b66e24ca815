"""Value Object Money - a monetary amount in major units with its currency."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from travel_api.domain.constants import MINOR_UNITS_PER_MAJOR


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary amount.

    Attributes:
        amount: Decimal amount in major units (e.g. dollars).
        currency_code: ISO 4217 code, stored lower-case the way Stripe reports it.
    """

    amount: Decimal
    currency_code: str

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

        if len(self.currency_code) != 3:
            raise ValueError(f"currency_code must be 3 characters: {self.currency_code}")
        object.__setattr__(self, "currency_code", self.currency_code.lower())

        if self.amount < 0:
            raise ValueError(f"amount cannot be negative: {self.amount}")

    def __mul__(self, factor: int) -> "Money":
        if not isinstance(factor, int):
            raise TypeError(f"Money can only be multiplied by int, got {type(factor)}")
        return Money(amount=self.amount * factor, currency_code=self.currency_code)

    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    @classmethod
    def from_minor_units(cls, minor: int, currency_code: str) -> "Money":
        """Build from the smallest currency unit (what Stripe reports)."""
        amount = (Decimal(minor) / MINOR_UNITS_PER_MAJOR).quantize(Decimal("0.01"))
        return cls(amount=amount, currency_code=currency_code)

    def to_minor_units(self) -> int:
        """Convert to the smallest currency unit, rounding half up."""
        return int(
            (self.amount * MINOR_UNITS_PER_MAJOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        )

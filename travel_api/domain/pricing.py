"""
Price rules for catalog items.

Prices are always recomputed here from catalog data; a client-declared
amount never reaches this module.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from travel_api.domain.constants import MAX_MINOR_AMOUNT, MAX_QUANTITY
from travel_api.domain.entities.catalog import CatalogItem, Package, Resort
from travel_api.domain.errors import ValidationError
from travel_api.domain.value_objects.money import Money


def parse_quantity(raw: Any, field: str = "quantity") -> int | None:
    """
    Parse a client-supplied count; None when absent or non-numeric.

    Counts beyond MAX_QUANTITY in either direction raise ValidationError.
    """
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None
    if abs(value) > MAX_QUANTITY:
        raise ValidationError(field, f"{field} must be at most {MAX_QUANTITY}")
    return int(value)


@dataclass(frozen=True)
class QuantityParams:
    guests: Any = None
    nights: Any = None

    def __post_init__(self) -> None:
        parse_quantity(self.guests, "guests")
        parse_quantity(self.nights, "nights")

    @property
    def guest_count(self) -> int:
        return max(parse_quantity(self.guests) or 1, 1)

    @property
    def night_count(self) -> int:
        return max(parse_quantity(self.nights) or 1, 1)

    @property
    def has_nights(self) -> bool:
        return parse_quantity(self.nights) is not None


def _unit_price(item: CatalogItem) -> Decimal:
    if isinstance(item, Package):
        return item.price or Decimal("0")
    if isinstance(item, Resort):
        return item.price_per_night or item.price or Decimal("0")
    raise TypeError(f"Unsupported catalog item: {type(item)!r}")


def price(item: CatalogItem, params: QuantityParams, currency: str) -> Money:
    """
    Expected charge for `item` in major units.

    Packages are priced per guest, resorts per night; both counts default to 1.
    A missing price yields zero.
    """
    quantity = params.guest_count if isinstance(item, Package) else params.night_count
    return Money(amount=_unit_price(item), currency_code=currency) * quantity


def expected_minor_amount(item: CatalogItem, params: QuantityParams, currency: str) -> int:
    amount = price(item, params, currency).to_minor_units()
    if amount > MAX_MINOR_AMOUNT:
        raise ValidationError("amount", "Booking total exceeds the maximum charge")
    return amount

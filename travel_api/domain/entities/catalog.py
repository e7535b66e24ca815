"""Catalog entities - the packages and resorts that can be booked."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from travel_api.domain.constants import ITEM_TYPE_PACKAGE, ITEM_TYPE_RESORT


@dataclass
class Package:
    """
    A vacation package sold at a flat per-person price.

    `price` is None when the listing was saved without one; pricing then
    treats it as zero.
    """

    id: str | None = None
    title: str = ""
    price: Decimal | None = None
    description: str | None = None
    location: str | None = None
    duration: str | None = None
    images: list[str] = field(default_factory=list)
    availability: bool = True
    valid_from: datetime | None = None
    valid_till: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    item_type = ITEM_TYPE_PACKAGE

    @property
    def display_title(self) -> str:
        return self.title or ""


@dataclass
class Resort:
    """
    A resort listing priced per night.

    Older listings only carry a generic `price`; it is used when
    `price_per_night` is missing.
    """

    id: str | None = None
    name: str = ""
    location: str = ""
    price_per_night: Decimal | None = None
    price: Decimal | None = None
    description: str | None = None
    amenities: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
    rating: Decimal | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    item_type = ITEM_TYPE_RESORT

    def __post_init__(self) -> None:
        self.amenities = [amenity.strip() for amenity in self.amenities]

    @property
    def display_title(self) -> str:
        return self.name or ""


CatalogItem = Package | Resort

"""Domain entities."""

from travel_api.domain.entities.booking import Booking
from travel_api.domain.entities.catalog import CatalogItem, Package, Resort
from travel_api.domain.entities.payment import PaymentRecord
from travel_api.domain.entities.user import UserAccount

__all__ = [
    "Booking",
    "CatalogItem",
    "Package",
    "Resort",
    "PaymentRecord",
    "UserAccount",
]

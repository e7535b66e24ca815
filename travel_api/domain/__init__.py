"""
Domain layer - travel booking.

Pure business rules with no framework dependencies.

Structure:
- entities/: Package, Resort, Booking, UserAccount, PaymentRecord
- value_objects/: immutable values (Money)
- pricing.py: expected charge for a catalog item
- errors.py: domain exceptions
- constants.py: item types, roles and statuses
"""

from travel_api.domain.constants import (
    BOOKING_STATUS_PAID,
    ITEM_TYPE_PACKAGE,
    ITEM_TYPE_RESORT,
    ITEM_TYPES,
    ROLE_ADMIN,
    ROLE_USER,
    ROLES,
)
from travel_api.domain.entities import (
    Booking,
    CatalogItem,
    Package,
    PaymentRecord,
    Resort,
    UserAccount,
)
from travel_api.domain.errors import (
    AmountMismatchError,
    BookingAlreadyConfirmedError,
    BookingNotFoundError,
    DomainError,
    ForbiddenError,
    InvalidIdentifierError,
    InvalidRoleError,
    ItemNotFoundError,
    PaymentGatewayError,
    PaymentItemMismatchError,
    PaymentNotFoundError,
    PaymentNotSucceededError,
    UnauthorizedError,
    UserNotFoundError,
    ValidationError,
)
from travel_api.domain.pricing import QuantityParams, expected_minor_amount, price
from travel_api.domain.value_objects import Money

__all__ = [
    # Constants
    "BOOKING_STATUS_PAID",
    "ITEM_TYPE_PACKAGE",
    "ITEM_TYPE_RESORT",
    "ITEM_TYPES",
    "ROLE_ADMIN",
    "ROLE_USER",
    "ROLES",
    # Entities
    "Booking",
    "CatalogItem",
    "Package",
    "PaymentRecord",
    "Resort",
    "UserAccount",
    # Pricing
    "QuantityParams",
    "expected_minor_amount",
    "price",
    # Value Objects
    "Money",
    # Errors
    "DomainError",
    "UnauthorizedError",
    "ForbiddenError",
    "ValidationError",
    "InvalidIdentifierError",
    "InvalidRoleError",
    "ItemNotFoundError",
    "UserNotFoundError",
    "BookingNotFoundError",
    "PaymentNotFoundError",
    "PaymentNotSucceededError",
    "AmountMismatchError",
    "PaymentItemMismatchError",
    "BookingAlreadyConfirmedError",
    "PaymentGatewayError",
]

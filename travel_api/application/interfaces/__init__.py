"""Application ports (interfaces implemented by infrastructure)."""

from travel_api.application.interfaces.booking_repo import BookingRepo
from travel_api.application.interfaces.catalog_repo import CatalogRepo
from travel_api.application.interfaces.clock import Clock, FakeClock, SystemClock
from travel_api.application.interfaces.identity_verifier import CallerIdentity, IdentityVerifier
from travel_api.application.interfaces.stripe_gateway import StripeGateway
from travel_api.application.interfaces.transaction_manager import TransactionManager
from travel_api.application.interfaces.user_repo import UserRepo

__all__ = [
    # Repositories
    "BookingRepo",
    "CatalogRepo",
    "UserRepo",
    # Gateways
    "StripeGateway",
    "IdentityVerifier",
    "CallerIdentity",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
]

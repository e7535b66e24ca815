"""In-memory implementations for local development and tests."""

from travel_api.infrastructure.in_memory.booking_repo import InMemoryBookingRepo
from travel_api.infrastructure.in_memory.catalog_repo import InMemoryCatalogRepo
from travel_api.infrastructure.in_memory.stripe_gateway import StubStripeGateway
from travel_api.infrastructure.in_memory.transaction_manager import NoopTransactionManager
from travel_api.infrastructure.in_memory.user_repo import InMemoryUserRepo

__all__ = [
    # Repositories
    "InMemoryBookingRepo",
    "InMemoryCatalogRepo",
    "InMemoryUserRepo",
    # Gateways
    "StubStripeGateway",
    # Infrastructure
    "NoopTransactionManager",
]

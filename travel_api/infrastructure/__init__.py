"""
Infrastructure layer - travel booking.

Concrete implementations of the application ports.

Structure:
- db/: SQLAlchemy tables, engine and repositories
- gateways/: Stripe payment authority
- auth/: identity token verifiers (Firebase, local JWT)
- in_memory/: in-memory implementations for development and tests
"""

from travel_api.infrastructure.auth import FirebaseIdentityVerifier, LocalJwtIdentityVerifier
from travel_api.infrastructure.db.repositories.booking_repo_sql import BookingRepoSQL
from travel_api.infrastructure.db.repositories.catalog_repo_sql import CatalogRepoSQL
from travel_api.infrastructure.db.repositories.user_repo_sql import UserRepoSQL
from travel_api.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from travel_api.infrastructure.gateways.stripe_gateway_real import StripeGatewayReal
from travel_api.infrastructure.in_memory import (
    InMemoryBookingRepo,
    InMemoryCatalogRepo,
    InMemoryUserRepo,
    NoopTransactionManager,
    StubStripeGateway,
)

__all__ = [
    # Database - Repositories SQL
    "BookingRepoSQL",
    "CatalogRepoSQL",
    "UserRepoSQL",
    "SQLAlchemyTransactionManager",
    # Gateways
    "StripeGatewayReal",
    # Identity
    "FirebaseIdentityVerifier",
    "LocalJwtIdentityVerifier",
    # In-Memory Implementations
    "InMemoryBookingRepo",
    "InMemoryCatalogRepo",
    "InMemoryUserRepo",
    "StubStripeGateway",
    "NoopTransactionManager",
]

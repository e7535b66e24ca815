"""
Shared fixtures.

Endpoint tests run the application in in-memory mode (in-memory repositories,
stub Stripe gateway, local HS256 identity tokens) with a fixed clock.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from travel_api.application.interfaces.clock import FakeClock
from travel_api.config import Settings
from travel_api.domain.constants import ROLE_ADMIN
from travel_api.domain.entities.catalog import Package, Resort
from travel_api.domain.entities.user import UserAccount
from travel_api.infrastructure.auth.local_jwt_verifier import LocalJwtIdentityVerifier
from travel_api.main import create_app

TEST_SECRET = "test-secret"
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        use_in_memory=True,
        identity_provider="local",
        auth_jwt_secret=TEST_SECRET,
        stripe_currency="usd",
        stripe_api_key=None,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def app(settings, clock):
    application = create_app(settings)
    application.state.clock = clock
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def bundle(app) -> dict:
    return app.state.bundle


@pytest.fixture
def token_for():
    verifier = LocalJwtIdentityVerifier(secret=TEST_SECRET)

    def _token_for(email: str, uid: str | None = None) -> dict:
        token = verifier.create_token(uid or f"uid-{email.split('@')[0]}", email)
        return {"Authorization": f"Bearer {token}"}

    return _token_for


@pytest.fixture
def alice_headers(token_for) -> dict:
    return token_for("alice@example.com", "uid-alice")


@pytest.fixture
def admin_headers(token_for, bundle) -> dict:
    bundle["user_repo"].users["admin@example.com"] = UserAccount(
        id="admin-1",
        uid="uid-admin",
        email="admin@example.com",
        name="Admin",
        role=ROLE_ADMIN,
        created_at=NOW,
    )
    return token_for("admin@example.com", "uid-admin")


@pytest.fixture
def package(bundle) -> Package:
    item = Package(
        id="pkg500",
        title="Sundarbans Mangrove Expedition",
        price=Decimal("500"),
        created_at=NOW,
    )
    bundle["catalog_repo"].items["package"][item.id] = item
    return item


@pytest.fixture
def resort(bundle) -> Resort:
    item = Resort(
        id="resort150",
        name="Sea Pearl Beach Resort",
        location="Cox's Bazar",
        price_per_night=Decimal("150"),
        amenities=[" Pool ", "Spa"],
        created_at=NOW,
    )
    bundle["catalog_repo"].items["resort"][item.id] = item
    return item

"""Sample catalog and admin account for local development."""

import logging
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.domain.constants import ROLE_ADMIN
from travel_api.domain.entities.catalog import CatalogItem, Package, Resort
from travel_api.domain.entities.user import UserAccount
from travel_api.domain.identifiers import new_id
from travel_api.infrastructure.db.repositories.catalog_repo_sql import CatalogRepoSQL
from travel_api.infrastructure.db.repositories.user_repo_sql import UserRepoSQL

logger = logging.getLogger(__name__)


def sample_catalog(now: datetime) -> list[CatalogItem]:
    return [
        Package(
            id=new_id(),
            title="Sundarbans Mangrove Expedition",
            price=Decimal("500.00"),
            location="Khulna",
            duration="3 days",
            created_at=now,
        ),
        Package(
            id=new_id(),
            title="Sajek Valley Retreat",
            price=Decimal("320.00"),
            location="Rangamati",
            duration="2 days",
            created_at=now,
        ),
        Resort(
            id=new_id(),
            name="Sea Pearl Beach Resort",
            location="Cox's Bazar",
            price_per_night=Decimal("150.00"),
            amenities=["Pool", "Spa", "Beach access"],
            rating=Decimal("4.60"),
            created_at=now,
        ),
    ]


async def seed(session: AsyncSession, admin_email: str | None = None) -> int:
    """Insert the sample catalog and, if given, an admin account. Returns rows written."""
    now = datetime.now(timezone.utc)
    catalog_repo = CatalogRepoSQL(session)
    user_repo = UserRepoSQL(session)
    written = 0

    async with session.begin():
        for item in sample_catalog(now):
            await catalog_repo.add(item)
            written += 1
        if admin_email and not await user_repo.get_by_email(admin_email):
            admin = UserAccount(
                id=new_id(),
                email=admin_email,
                name="Admin",
                role=ROLE_ADMIN,
                created_at=now,
            )
            await user_repo.add(admin)
            written += 1

    logger.info("Seeded database", extra={"rows": written})
    return written

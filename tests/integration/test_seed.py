from travel_api.infrastructure.db.repositories.catalog_repo_sql import CatalogRepoSQL
from travel_api.infrastructure.db.repositories.user_repo_sql import UserRepoSQL
from travel_api.infrastructure.db.seed import seed


async def test_seed_writes_catalog_and_admin(session):
    written = await seed(session, admin_email="admin@example.com")

    assert written == 4
    catalog = CatalogRepoSQL(session)
    assert await catalog.count("package") == 2
    assert await catalog.count("resort") == 1
    admin = await UserRepoSQL(session).get_by_email("admin@example.com")
    assert admin.is_admin


async def test_seed_does_not_duplicate_admin(session):
    await seed(session, admin_email="admin@example.com")

    written = await seed(session, admin_email="admin@example.com")

    assert written == 3
    assert await UserRepoSQL(session).count() == 1

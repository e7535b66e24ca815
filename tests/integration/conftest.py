import pytest

from travel_api.config import Settings
from travel_api.infrastructure.db.engine import build_engine, build_sessionmaker
from travel_api.infrastructure.db.tables import metadata


@pytest.fixture
def sql_settings(tmp_path) -> Settings:
    return Settings(
        use_in_memory=False,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'travel-test.db'}",
        identity_provider="local",
        auth_jwt_secret="test-secret",
        stripe_currency="usd",
    )


@pytest.fixture
async def engine(sql_settings):
    engine = build_engine(sql_settings)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    async with build_sessionmaker(engine)() as session:
        yield session

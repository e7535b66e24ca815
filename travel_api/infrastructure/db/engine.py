from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from travel_api.config import Settings

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./travel.db"


def build_engine(settings: Settings) -> AsyncEngine:
    url = settings.database_url or DEFAULT_DATABASE_URL
    options = {"echo": settings.sql_echo}
    if not url.startswith("sqlite"):
        options.update(pool_pre_ping=True, pool_recycle=3600)
    return create_async_engine(url, **options)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

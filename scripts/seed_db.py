import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from travel_api.config import get_settings  # noqa: E402
from travel_api.infrastructure.db.engine import build_engine, build_sessionmaker  # noqa: E402
from travel_api.infrastructure.db.seed import seed  # noqa: E402
from travel_api.infrastructure.db.tables import metadata  # noqa: E402


async def main(admin_email: str | None) -> None:
    engine = build_engine(get_settings())
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    print("Created missing tables.")

    async with build_sessionmaker(engine)() as session:
        written = await seed(session, admin_email=admin_email)
    print(f"Seeded {written} rows.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))

from dataclasses import fields
from datetime import datetime
from typing import Any, Sequence

from sqlalchemy import Table, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.application.interfaces.catalog_repo import CatalogRepo
from travel_api.domain.constants import ITEM_TYPE_PACKAGE, ITEM_TYPE_RESORT
from travel_api.domain.entities.catalog import CatalogItem, Package, Resort
from travel_api.infrastructure.db.tables import as_utc, packages, resorts

_TABLES: dict[str, tuple[Table, type]] = {
    ITEM_TYPE_PACKAGE: (packages, Package),
    ITEM_TYPE_RESORT: (resorts, Resort),
}

_DATETIME_COLUMNS = ("valid_from", "valid_till", "created_at", "updated_at")


class CatalogRepoSQL(CatalogRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, item_type: str, item_id: str) -> CatalogItem | None:
        table, entity = _TABLES[item_type]
        result = await self._session.execute(select(table).where(table.c.id == item_id))
        row = result.mappings().first()
        return self._map_item(entity, row) if row else None

    async def list(self, item_type: str, limit: int | None = None) -> Sequence[CatalogItem]:
        table, entity = _TABLES[item_type]
        stmt = select(table).order_by(table.c.created_at.desc(), table.c.id.desc())
        if limit:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._map_item(entity, row) for row in result.mappings().all()]

    async def add(self, item: CatalogItem) -> CatalogItem:
        table, entity = _TABLES[item.item_type]
        values = {f.name: getattr(item, f.name) for f in fields(entity)}
        await self._session.execute(insert(table).values(**values))
        return item

    async def update(
        self,
        item_type: str,
        item_id: str,
        changes: dict[str, Any],
        updated_at: datetime,
    ) -> bool:
        table, _ = _TABLES[item_type]
        values = {key: value for key, value in changes.items() if key in table.c}
        stmt = update(table).where(table.c.id == item_id).values(**values, updated_at=updated_at)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def delete(self, item_type: str, item_id: str) -> bool:
        table, _ = _TABLES[item_type]
        result = await self._session.execute(delete(table).where(table.c.id == item_id))
        return result.rowcount > 0

    async def count(self, item_type: str) -> int:
        table, _ = _TABLES[item_type]
        result = await self._session.execute(select(func.count()).select_from(table))
        return result.scalar_one()

    def _map_item(self, entity: type, row) -> CatalogItem:
        values = {f.name: row.get(f.name) for f in fields(entity)}
        for column in _DATETIME_COLUMNS:
            if column in values:
                values[column] = as_utc(values[column])
        for column in ("images", "amenities"):
            if column in values:
                values[column] = list(values[column] or [])
        if "availability" in values and values["availability"] is None:
            values["availability"] = True
        return entity(**values)

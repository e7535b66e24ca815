from dataclasses import replace
from datetime import datetime
from typing import Any, Sequence

from travel_api.application.interfaces.catalog_repo import CatalogRepo
from travel_api.domain.constants import ITEM_TYPES
from travel_api.domain.entities.catalog import CatalogItem


class InMemoryCatalogRepo(CatalogRepo):
    def __init__(self) -> None:
        self.items: dict[str, dict[str, CatalogItem]] = {item_type: {} for item_type in ITEM_TYPES}

    async def get(self, item_type: str, item_id: str) -> CatalogItem | None:
        return self.items[item_type].get(item_id)

    async def list(self, item_type: str, limit: int | None = None) -> Sequence[CatalogItem]:
        ordered = sorted(
            self.items[item_type].values(),
            key=lambda item: (item.created_at is not None, item.created_at),
            reverse=True,
        )
        return ordered[:limit] if limit else ordered

    async def add(self, item: CatalogItem) -> CatalogItem:
        if item.id in self.items[item.item_type]:
            raise ValueError("Catalog item id already exists")
        self.items[item.item_type][item.id] = item
        return item

    async def update(
        self,
        item_type: str,
        item_id: str,
        changes: dict[str, Any],
        updated_at: datetime,
    ) -> bool:
        item = self.items[item_type].get(item_id)
        if item is None:
            return False
        self.items[item_type][item_id] = replace(item, **changes, updated_at=updated_at)
        return True

    async def delete(self, item_type: str, item_id: str) -> bool:
        return self.items[item_type].pop(item_id, None) is not None

    async def count(self, item_type: str) -> int:
        return len(self.items[item_type])

from datetime import datetime
from typing import Any, Sequence

from travel_api.domain.entities.catalog import CatalogItem


class CatalogRepo:
    """Packages and resorts, addressed by item type and id."""

    async def get(self, item_type: str, item_id: str) -> CatalogItem | None:
        raise NotImplementedError

    async def list(self, item_type: str, limit: int | None = None) -> Sequence[CatalogItem]:
        """Newest first; `limit` of None or 0 returns everything."""
        raise NotImplementedError

    async def add(self, item: CatalogItem) -> CatalogItem:
        raise NotImplementedError

    async def update(
        self,
        item_type: str,
        item_id: str,
        changes: dict[str, Any],
        updated_at: datetime,
    ) -> bool:
        """Apply `changes`; False when no item matched."""
        raise NotImplementedError

    async def delete(self, item_type: str, item_id: str) -> bool:
        raise NotImplementedError

    async def count(self, item_type: str) -> int:
        raise NotImplementedError

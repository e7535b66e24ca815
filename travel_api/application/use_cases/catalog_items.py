"""Create/read/update/delete for packages and resorts, parameterized by item type."""

import logging
from dataclasses import replace
from typing import Any, Sequence

from travel_api.application.interfaces.catalog_repo import CatalogRepo
from travel_api.application.interfaces.clock import Clock
from travel_api.application.interfaces.transaction_manager import TransactionManager
from travel_api.application.use_cases.catalog_lookup import ensure_item_type
from travel_api.domain.constants import MAX_PAGE
from travel_api.domain.entities.catalog import CatalogItem
from travel_api.domain.errors import InvalidIdentifierError, ItemNotFoundError
from travel_api.domain.identifiers import candidate_ids, is_valid_id, new_id


def _checked_candidates(item_type: str, item_id: str) -> list[str]:
    ensure_item_type(item_type)
    if not is_valid_id(item_id):
        raise InvalidIdentifierError(item_type, item_id)
    return candidate_ids(item_id)


class CreateCatalogItemUseCase:
    def __init__(
        self,
        catalog_repo: CatalogRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, item: CatalogItem) -> CatalogItem:
        item = replace(item, id=new_id(), created_at=self._clock.now(), updated_at=None)
        async with self._transaction_manager.start():
            item = await self._catalog_repo.add(item)
        self._logger.info(
            "Catalog item created",
            extra={"item_type": item.item_type, "item_id": item.id},
        )
        return item


class ListCatalogItemsUseCase:
    def __init__(self, catalog_repo: CatalogRepo) -> None:
        self._catalog_repo = catalog_repo

    async def execute(self, item_type: str, limit: int | None = None) -> Sequence[CatalogItem]:
        ensure_item_type(item_type)
        limit = min(limit, MAX_PAGE) if limit and limit > 0 else None
        return await self._catalog_repo.list(item_type, limit=limit)


class GetCatalogItemUseCase:
    def __init__(self, catalog_repo: CatalogRepo) -> None:
        self._catalog_repo = catalog_repo

    async def execute(self, item_type: str, item_id: str) -> CatalogItem:
        for candidate in _checked_candidates(item_type, item_id):
            item = await self._catalog_repo.get(item_type, candidate)
            if item:
                return item
        raise ItemNotFoundError(item_type, item_id)


class UpdateCatalogItemUseCase:
    """Partial update; only the supplied fields change and `updated_at` is stamped."""

    def __init__(
        self,
        catalog_repo: CatalogRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(self, item_type: str, item_id: str, changes: dict[str, Any]) -> CatalogItem:
        candidates = _checked_candidates(item_type, item_id)
        changes = {key: value for key, value in changes.items() if key not in ("id", "created_at")}

        async with self._transaction_manager.start():
            for candidate in candidates:
                if await self._catalog_repo.update(item_type, candidate, changes, self._clock.now()):
                    item = await self._catalog_repo.get(item_type, candidate)
                    break
            else:
                raise ItemNotFoundError(item_type, item_id)

        self._logger.info(
            "Catalog item updated",
            extra={"item_type": item_type, "item_id": item.id, "fields": sorted(changes)},
        )
        return item


class DeleteCatalogItemUseCase:
    def __init__(self, catalog_repo: CatalogRepo, transaction_manager: TransactionManager) -> None:
        self._catalog_repo = catalog_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, item_type: str, item_id: str) -> None:
        candidates = _checked_candidates(item_type, item_id)
        async with self._transaction_manager.start():
            for candidate in candidates:
                if await self._catalog_repo.delete(item_type, candidate):
                    break
            else:
                raise ItemNotFoundError(item_type, item_id)
        self._logger.info("Catalog item deleted", extra={"item_type": item_type, "item_id": item_id})

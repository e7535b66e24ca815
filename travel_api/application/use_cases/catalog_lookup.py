from travel_api.application.interfaces.catalog_repo import CatalogRepo
from travel_api.domain.constants import ITEM_TYPES
from travel_api.domain.entities.catalog import CatalogItem
from travel_api.domain.errors import ItemNotFoundError, ValidationError
from travel_api.domain.identifiers import candidate_ids, is_valid_id


def ensure_item_type(item_type: str) -> None:
    if item_type not in ITEM_TYPES:
        raise ValidationError("itemType", f"itemType must be one of: {', '.join(ITEM_TYPES)}")


async def find_catalog_item(
    catalog_repo: CatalogRepo,
    item_type: str,
    item_id: str,
) -> CatalogItem:
    """Resolve a package/resort by canonical UUID id first, then by raw string id."""
    ensure_item_type(item_type)
    if is_valid_id(item_id):
        for candidate in candidate_ids(item_id):
            item = await catalog_repo.get(item_type, candidate)
            if item:
                return item
    raise ItemNotFoundError(item_type, item_id)

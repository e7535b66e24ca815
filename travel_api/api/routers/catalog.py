"""Package and resort routes; both map onto the same item-type-parameterized use cases."""

from fastapi import APIRouter, Depends, Query, status

from travel_api.api.dependencies import get_current_identity, get_use_cases
from travel_api.api.schemas.catalog import (
    PackageCreateRequest,
    PackageCreatedResponse,
    PackageResponse,
    PackageUpdateRequest,
    ResortCreateRequest,
    ResortCreatedResponse,
    ResortResponse,
    ResortUpdateRequest,
)
from travel_api.api.schemas.common import MessageResponse
from travel_api.application.interfaces.identity_verifier import CallerIdentity
from travel_api.domain.constants import ITEM_TYPE_PACKAGE, ITEM_TYPE_RESORT

router = APIRouter()


# === Packages ===


@router.post("/packages", response_model=PackageCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_package(
    payload: PackageCreateRequest,
    _: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> PackageCreatedResponse:
    package = await use_cases["create_catalog_item"].execute(payload.to_entity())
    return PackageCreatedResponse(message="Package created", package=PackageResponse.from_entity(package))


@router.get("/packages", response_model=list[PackageResponse])
async def list_packages(
    limit: int | None = Query(default=None),
    use_cases=Depends(get_use_cases),
) -> list[PackageResponse]:
    packages = await use_cases["list_catalog_items"].execute(ITEM_TYPE_PACKAGE, limit=limit)
    return [PackageResponse.from_entity(package) for package in packages]


@router.get("/packages/{package_id}", response_model=PackageResponse)
async def get_package(package_id: str, use_cases=Depends(get_use_cases)) -> PackageResponse:
    package = await use_cases["get_catalog_item"].execute(ITEM_TYPE_PACKAGE, package_id)
    return PackageResponse.from_entity(package)


@router.put("/packages/{package_id}", response_model=PackageResponse)
async def update_package(
    package_id: str,
    payload: PackageUpdateRequest,
    _: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> PackageResponse:
    package = await use_cases["update_catalog_item"].execute(
        ITEM_TYPE_PACKAGE, package_id, payload.changes()
    )
    return PackageResponse.from_entity(package)


@router.delete("/packages/{package_id}", response_model=MessageResponse)
async def delete_package(
    package_id: str,
    _: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> MessageResponse:
    await use_cases["delete_catalog_item"].execute(ITEM_TYPE_PACKAGE, package_id)
    return MessageResponse(message="Package deleted")


# === Resorts ===


@router.post("/resorts", response_model=ResortCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_resort(
    payload: ResortCreateRequest,
    _: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> ResortCreatedResponse:
    resort = await use_cases["create_catalog_item"].execute(payload.to_entity())
    return ResortCreatedResponse(message="Resort added", resort=ResortResponse.from_entity(resort))


@router.get("/resorts", response_model=list[ResortResponse])
async def list_resorts(
    limit: int | None = Query(default=None),
    use_cases=Depends(get_use_cases),
) -> list[ResortResponse]:
    resorts = await use_cases["list_catalog_items"].execute(ITEM_TYPE_RESORT, limit=limit)
    return [ResortResponse.from_entity(resort) for resort in resorts]


@router.get("/resorts/{resort_id}", response_model=ResortResponse)
async def get_resort(resort_id: str, use_cases=Depends(get_use_cases)) -> ResortResponse:
    resort = await use_cases["get_catalog_item"].execute(ITEM_TYPE_RESORT, resort_id)
    return ResortResponse.from_entity(resort)


@router.put("/resorts/{resort_id}", response_model=ResortResponse)
async def update_resort(
    resort_id: str,
    payload: ResortUpdateRequest,
    _: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> ResortResponse:
    resort = await use_cases["update_catalog_item"].execute(
        ITEM_TYPE_RESORT, resort_id, payload.changes()
    )
    return ResortResponse.from_entity(resort)


@router.delete("/resorts/{resort_id}", response_model=MessageResponse)
async def delete_resort(
    resort_id: str,
    _: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> MessageResponse:
    await use_cases["delete_catalog_item"].execute(ITEM_TYPE_RESORT, resort_id)
    return MessageResponse(message="Resort deleted")

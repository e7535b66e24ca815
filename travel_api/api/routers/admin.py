from fastapi import APIRouter, Depends, Query

from travel_api.api.dependencies import get_use_cases, require_admin
from travel_api.api.schemas.admin import AdminOverviewResponse
from travel_api.application.interfaces.identity_verifier import CallerIdentity

router = APIRouter()


@router.get("/admin/overview", response_model=AdminOverviewResponse)
async def admin_overview(
    days: int | None = Query(default=None),
    _: CallerIdentity = Depends(require_admin),
    use_cases=Depends(get_use_cases),
) -> AdminOverviewResponse:
    overview = await use_cases["admin_overview"].execute(days=days)
    return AdminOverviewResponse.from_overview(overview)

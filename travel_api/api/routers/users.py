from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from travel_api.api.dependencies import (
    get_current_identity,
    get_optional_identity,
    get_use_cases,
    require_admin,
)
from travel_api.api.schemas.users import (
    RegisterUserRequest,
    RegisterUserResponse,
    UpdateRoleRequest,
    UpdateRoleResponse,
    UserListResponse,
    UserResponse,
)
from travel_api.application.interfaces.identity_verifier import CallerIdentity

router = APIRouter()


@router.post(
    "/users",
    response_model=RegisterUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={200: {"model": RegisterUserResponse, "description": "User already exists"}},
)
async def register_user(
    payload: RegisterUserRequest,
    caller: CallerIdentity | None = Depends(get_optional_identity),
    use_cases=Depends(get_use_cases),
):
    account, created = await use_cases["register_user"].execute(
        email=payload.email,
        name=payload.name,
        profile_pic=payload.profile_pic,
        caller=caller,
    )
    if created:
        return RegisterUserResponse(message="User created", user=UserResponse.from_entity(account))
    body = RegisterUserResponse(message="User already exists", user=UserResponse.from_entity(account))
    return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump(mode="json", by_alias=True))


@router.get("/users", response_model=UserListResponse)
async def list_users(
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
    _: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> UserListResponse:
    result = await use_cases["list_users"].execute(page=page, limit=limit)
    return UserListResponse(
        users=[UserResponse.from_entity(user) for user in result.items],
        total=result.total,
        page=result.page,
        pages=result.pages,
    )


@router.get("/users/{email}", response_model=UserResponse)
async def get_user_profile(
    email: str,
    _: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> UserResponse:
    account = await use_cases["get_user_profile"].execute(email)
    return UserResponse.from_entity(account, resolve_picture=True)


@router.put("/users/{email}/role", response_model=UpdateRoleResponse)
async def update_user_role(
    email: str,
    payload: UpdateRoleRequest,
    _: CallerIdentity = Depends(require_admin),
    use_cases=Depends(get_use_cases),
) -> UpdateRoleResponse:
    await use_cases["update_user_role"].execute(email=email, role=payload.role)
    return UpdateRoleResponse(message="Role updated", email=email, new_role=payload.role)

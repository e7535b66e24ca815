from datetime import datetime

from pydantic import EmailStr, Field

from travel_api.api.schemas.common import ApiModel
from travel_api.domain.entities.user import UserAccount


class RegisterUserRequest(ApiModel):
    name: str | None = None
    email: EmailStr
    profile_pic: str | None = None


class UserResponse(ApiModel):
    id: str | None = Field(default=None, alias="_id")
    name: str | None = None
    email: str
    role: str
    profile_pic: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: UserAccount, resolve_picture: bool = False) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            profile_pic=user.resolved_profile_pic if resolve_picture else user.profile_pic,
            created_at=user.created_at,
        )


class RegisterUserResponse(ApiModel):
    message: str
    user: UserResponse


class UserListResponse(ApiModel):
    users: list[UserResponse]
    total: int
    page: int
    pages: int


class UpdateRoleRequest(ApiModel):
    role: str | None = None


class UpdateRoleResponse(ApiModel):
    message: str
    email: str
    new_role: str

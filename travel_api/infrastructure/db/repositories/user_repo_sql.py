from datetime import datetime
from typing import Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.application.interfaces.user_repo import UserRepo
from travel_api.domain.entities.user import UserAccount
from travel_api.infrastructure.db.tables import as_utc, users


class UserRepoSQL(UserRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_email(self, email: str) -> UserAccount | None:
        result = await self._session.execute(select(users).where(users.c.email == email))
        row = result.mappings().first()
        return self._map_user(row) if row else None

    async def add(self, user: UserAccount) -> UserAccount:
        stmt = insert(users).values(
            id=user.id,
            uid=user.uid,
            email=user.email,
            name=user.name,
            profile_pic=user.profile_pic,
            role=user.role,
            created_at=user.created_at,
        )
        await self._session.execute(stmt)
        return user

    async def list_page(self, offset: int, limit: int) -> Sequence[UserAccount]:
        stmt = select(users).order_by(users.c.created_at.asc(), users.c.id).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return [self._map_user(row) for row in result.mappings().all()]

    async def count(
        self,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> int:
        stmt = select(func.count()).select_from(users)
        if created_from is not None:
            stmt = stmt.where(users.c.created_at >= created_from)
        if created_to is not None:
            stmt = stmt.where(users.c.created_at < created_to)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def update_role(self, email: str, role: str) -> bool:
        result = await self._session.execute(
            update(users).where(users.c.email == email).values(role=role)
        )
        return result.rowcount > 0

    def _map_user(self, row) -> UserAccount:
        return UserAccount(
            id=row["id"],
            uid=row.get("uid"),
            email=row["email"],
            name=row.get("name"),
            profile_pic=row.get("profile_pic"),
            role=row["role"],
            created_at=as_utc(row.get("created_at")),
        )

from datetime import datetime
from typing import Sequence

from travel_api.domain.entities.user import UserAccount


class UserRepo:
    async def get_by_email(self, email: str) -> UserAccount | None:
        raise NotImplementedError

    async def add(self, user: UserAccount) -> UserAccount:
        raise NotImplementedError

    async def list_page(self, offset: int, limit: int) -> Sequence[UserAccount]:
        raise NotImplementedError

    async def count(
        self,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> int:
        raise NotImplementedError

    async def update_role(self, email: str, role: str) -> bool:
        """False when no user has `email`."""
        raise NotImplementedError

from datetime import datetime
from typing import Sequence

from travel_api.application.interfaces.user_repo import UserRepo
from travel_api.domain.entities.user import UserAccount


class InMemoryUserRepo(UserRepo):
    def __init__(self) -> None:
        self.users: dict[str, UserAccount] = {}

    async def get_by_email(self, email: str) -> UserAccount | None:
        return self.users.get(email)

    async def add(self, user: UserAccount) -> UserAccount:
        if user.email in self.users:
            raise ValueError("Email already registered")
        self.users[user.email] = user
        return user

    async def list_page(self, offset: int, limit: int) -> Sequence[UserAccount]:
        return list(self.users.values())[offset : offset + limit]

    async def count(
        self,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> int:
        return sum(
            1
            for user in self.users.values()
            if (created_from is None or (user.created_at and user.created_at >= created_from))
            and (created_to is None or (user.created_at and user.created_at < created_to))
        )

    async def update_role(self, email: str, role: str) -> bool:
        user = self.users.get(email)
        if user is None:
            return False
        user.role = role
        return True

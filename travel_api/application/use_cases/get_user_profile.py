from travel_api.application.interfaces.user_repo import UserRepo
from travel_api.domain.entities.user import UserAccount
from travel_api.domain.errors import UserNotFoundError


class GetUserProfileUseCase:
    def __init__(self, user_repo: UserRepo) -> None:
        self._user_repo = user_repo

    async def execute(self, email: str) -> UserAccount:
        account = await self._user_repo.get_by_email(email)
        if not account:
            raise UserNotFoundError(email)
        return account

from travel_api.application.interfaces.identity_verifier import CallerIdentity
from travel_api.application.interfaces.user_repo import UserRepo
from travel_api.domain.entities.user import UserAccount
from travel_api.domain.errors import ForbiddenError


class EnsureAdminUseCase:
    """Admin role lives on the stored account, looked up by verified email."""

    def __init__(self, user_repo: UserRepo) -> None:
        self._user_repo = user_repo

    async def execute(self, caller: CallerIdentity) -> UserAccount:
        if not caller.email:
            raise ForbiddenError()
        account = await self._user_repo.get_by_email(caller.email)
        if not account or not account.is_admin:
            raise ForbiddenError()
        return account

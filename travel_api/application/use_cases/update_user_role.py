import logging

from travel_api.application.interfaces.transaction_manager import TransactionManager
from travel_api.application.interfaces.user_repo import UserRepo
from travel_api.domain.constants import ROLES
from travel_api.domain.errors import InvalidRoleError, UserNotFoundError


class UpdateUserRoleUseCase:
    def __init__(self, user_repo: UserRepo, transaction_manager: TransactionManager) -> None:
        self._user_repo = user_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, email: str, role: str | None) -> None:
        if role not in ROLES:
            raise InvalidRoleError(role)

        async with self._transaction_manager.start():
            if not await self._user_repo.update_role(email, role):
                raise UserNotFoundError(email)

        self._logger.info("User role updated", extra={"role": role})

import logging

from travel_api.application.interfaces.clock import Clock
from travel_api.application.interfaces.identity_verifier import CallerIdentity
from travel_api.application.interfaces.transaction_manager import TransactionManager
from travel_api.application.interfaces.user_repo import UserRepo
from travel_api.domain.constants import ROLE_USER
from travel_api.domain.entities.user import UserAccount
from travel_api.domain.errors import ValidationError
from travel_api.domain.identifiers import new_id


class RegisterUserUseCase:
    def __init__(
        self,
        user_repo: UserRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
    ) -> None:
        self._user_repo = user_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        email: str,
        name: str | None = None,
        profile_pic: str | None = None,
        caller: CallerIdentity | None = None,
    ) -> tuple[UserAccount, bool]:
        """
        Create the account for `email` unless it already exists.

        Returns the account and whether it was created by this call. The uid
        of a verified caller is recorded on the new account.
        """
        email = (email or "").strip()
        if not email:
            raise ValidationError("email", "Email is required")

        async with self._transaction_manager.start():
            existing = await self._user_repo.get_by_email(email)
            if existing:
                return existing, False

            account = UserAccount(
                id=new_id(),
                uid=caller.uid if caller else None,
                email=email,
                name=name,
                profile_pic=profile_pic,
                role=ROLE_USER,
                created_at=self._clock.now(),
            )
            account = await self._user_repo.add(account)

        self._logger.info("User registered", extra={"user_id": account.id})
        return account, True

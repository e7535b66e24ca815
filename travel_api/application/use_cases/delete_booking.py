import logging

from travel_api.application.interfaces.booking_repo import BookingRepo
from travel_api.application.interfaces.identity_verifier import CallerIdentity
from travel_api.application.interfaces.transaction_manager import TransactionManager
from travel_api.application.interfaces.user_repo import UserRepo
from travel_api.domain.errors import BookingNotFoundError, ForbiddenError, InvalidIdentifierError
from travel_api.domain.identifiers import is_valid_id


class DeleteBookingUseCase:
    """Owners may delete their own bookings; admins may delete any."""

    def __init__(
        self,
        booking_repo: BookingRepo,
        user_repo: UserRepo,
        transaction_manager: TransactionManager,
    ) -> None:
        self._booking_repo = booking_repo
        self._user_repo = user_repo
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, booking_id: str, caller: CallerIdentity) -> None:
        if not is_valid_id(booking_id):
            raise InvalidIdentifierError("booking", booking_id)

        async with self._transaction_manager.start():
            booking = await self._booking_repo.get(booking_id)
            if not booking:
                raise BookingNotFoundError(booking_id)

            if not booking.is_owned_by(caller.email):
                account = await self._user_repo.get_by_email(caller.email) if caller.email else None
                if not account or not account.is_admin:
                    self._logger.warning(
                        "Booking delete refused",
                        extra={"booking_id": booking_id, "caller_uid": caller.uid},
                    )
                    raise ForbiddenError()

            if not await self._booking_repo.delete(booking_id):
                raise BookingNotFoundError(booking_id)

        self._logger.info("Booking deleted", extra={"booking_id": booking_id})

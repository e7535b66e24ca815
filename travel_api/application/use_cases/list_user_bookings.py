from typing import Sequence

from travel_api.application.interfaces.booking_repo import BookingRepo
from travel_api.application.interfaces.identity_verifier import CallerIdentity
from travel_api.domain.entities.booking import Booking


class ListUserBookingsUseCase:
    def __init__(self, booking_repo: BookingRepo) -> None:
        self._booking_repo = booking_repo

    async def execute(self, caller: CallerIdentity) -> Sequence[Booking]:
        if not caller.email:
            return []
        return await self._booking_repo.list_by_user_email(caller.email)

from travel_api.application.interfaces.booking_repo import BookingRepo
from travel_api.domain.entities.booking import Booking
from travel_api.domain.errors import BookingNotFoundError, InvalidIdentifierError
from travel_api.domain.identifiers import is_valid_id


class GetBookingUseCase:
    def __init__(self, booking_repo: BookingRepo) -> None:
        self._booking_repo = booking_repo

    async def execute(self, booking_id: str) -> Booking:
        if not is_valid_id(booking_id):
            raise InvalidIdentifierError("booking", booking_id)
        booking = await self._booking_repo.get(booking_id)
        if not booking:
            raise BookingNotFoundError(booking_id)
        return booking

from datetime import datetime
from typing import Sequence

from travel_api.application.interfaces.booking_repo import BookingRepo
from travel_api.domain.entities.booking import Booking
from travel_api.domain.errors import BookingAlreadyConfirmedError


def _newest_first(bookings: list[Booking]) -> list[Booking]:
    return sorted(bookings, key=lambda booking: booking.created_at, reverse=True)


class InMemoryBookingRepo(BookingRepo):
    def __init__(self) -> None:
        self.bookings: dict[str, Booking] = {}
        self.by_payment: dict[str, str] = {}

    async def add(self, booking: Booking) -> Booking:
        # Same guarantee as the unique payment_id column in SQL mode.
        existing_id = self.by_payment.get(booking.payment_id)
        if existing_id is not None:
            raise BookingAlreadyConfirmedError(booking.payment_id, existing_id)
        self.bookings[booking.id] = booking
        self.by_payment[booking.payment_id] = booking.id
        return booking

    async def get(self, booking_id: str) -> Booking | None:
        return self.bookings.get(booking_id)

    async def find_by_payment(self, payment_id: str) -> Booking | None:
        booking_id = self.by_payment.get(payment_id)
        return self.bookings.get(booking_id) if booking_id else None

    async def list_by_user_email(self, email: str) -> Sequence[Booking]:
        return _newest_first([b for b in self.bookings.values() if b.user_email == email])

    async def list_page(self, offset: int, limit: int) -> Sequence[Booking]:
        return _newest_first(list(self.bookings.values()))[offset : offset + limit]

    async def count(
        self,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> int:
        return sum(
            1
            for booking in self.bookings.values()
            if (created_from is None or booking.created_at >= created_from)
            and (created_to is None or booking.created_at < created_to)
        )

    async def delete(self, booking_id: str) -> bool:
        booking = self.bookings.pop(booking_id, None)
        if booking is None:
            return False
        self.by_payment.pop(booking.payment_id, None)
        return True

from datetime import datetime
from typing import Sequence

from travel_api.domain.entities.booking import Booking


class BookingRepo:
    async def add(self, booking: Booking) -> Booking:
        """
        Persist a new booking.

        Raises BookingAlreadyConfirmedError when a booking already exists for
        the same payment id.
        """
        raise NotImplementedError

    async def get(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    async def find_by_payment(self, payment_id: str) -> Booking | None:
        raise NotImplementedError

    async def list_by_user_email(self, email: str) -> Sequence[Booking]:
        """Bookings owned by `email`, newest first."""
        raise NotImplementedError

    async def list_page(self, offset: int, limit: int) -> Sequence[Booking]:
        """All bookings, newest first."""
        raise NotImplementedError

    async def count(
        self,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> int:
        """Count bookings created in [created_from, created_to)."""
        raise NotImplementedError

    async def delete(self, booking_id: str) -> bool:
        raise NotImplementedError

"""Booking entity - the durable result of a confirmed payment."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from travel_api.domain.constants import BOOKING_STATUS_PAID


@dataclass
class Booking:
    """
    A paid booking of a catalog item.

    Created once by the confirmation flow and never updated afterwards;
    `payment_id` is unique across all bookings.
    """

    id: str | None
    user_id: str | None
    user_email: str | None
    item_type: str
    item_id: str
    item_title: str
    amount: Decimal
    currency: str
    payment_id: str
    start_date: datetime | None = None
    nights: int | None = None
    guests: int = 1
    note: str = ""
    status: str = BOOKING_STATUS_PAID
    created_at: datetime | None = None

    def is_owned_by(self, email: str | None) -> bool:
        return bool(email) and self.user_email == email

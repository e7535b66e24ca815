from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import Field

from travel_api.api.schemas.common import ApiModel
from travel_api.domain.entities.booking import Booking

Quantity = int | float | str | None


class ConfirmBookingRequest(ApiModel):
    payment_intent_id: str = Field(min_length=1)
    item_type: Literal["package", "resort"]
    item_id: str = Field(min_length=1)
    nights: Quantity = None
    guests: Quantity = None
    start_date: str | None = None
    note: str | None = None


class ConfirmBookingResponse(ApiModel):
    message: str
    booking_id: str


class BookingResponse(ApiModel):
    id: str = Field(alias="_id")
    user_id: str | None = None
    user_email: str | None = None
    item_type: str
    item_id: str
    item_title: str
    start_date: datetime | None = None
    nights: int | None = None
    guests: int
    note: str = ""
    amount: Decimal
    currency: str
    payment_id: str
    status: str
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            user_id=booking.user_id,
            user_email=booking.user_email,
            item_type=booking.item_type,
            item_id=booking.item_id,
            item_title=booking.item_title,
            start_date=booking.start_date,
            nights=booking.nights,
            guests=booking.guests,
            note=booking.note,
            amount=booking.amount,
            currency=booking.currency,
            payment_id=booking.payment_id,
            status=booking.status,
            created_at=booking.created_at,
        )


class BookingListResponse(ApiModel):
    bookings: list[BookingResponse]
    total: int
    page: int
    pages: int

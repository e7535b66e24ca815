import logging
from datetime import datetime
from typing import Sequence

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.application.interfaces.booking_repo import BookingRepo
from travel_api.domain.entities.booking import Booking
from travel_api.domain.errors import BookingAlreadyConfirmedError
from travel_api.infrastructure.db.tables import as_utc, bookings

logger = logging.getLogger(__name__)


class BookingRepoSQL(BookingRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, booking: Booking) -> Booking:
        stmt = insert(bookings).values(
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
        try:
            await self._session.execute(stmt)
        except IntegrityError as exc:
            # uq_bookings_payment_id: a concurrent confirmation won the race.
            logger.warning(
                "Duplicate booking insert rejected",
                extra={"payment_intent_id": booking.payment_id},
            )
            raise BookingAlreadyConfirmedError(booking.payment_id) from exc
        return booking

    async def get(self, booking_id: str) -> Booking | None:
        return await self._fetch_one(select(bookings).where(bookings.c.id == booking_id))

    async def find_by_payment(self, payment_id: str) -> Booking | None:
        return await self._fetch_one(select(bookings).where(bookings.c.payment_id == payment_id))

    async def list_by_user_email(self, email: str) -> Sequence[Booking]:
        stmt = (
            select(bookings)
            .where(bookings.c.user_email == email)
            .order_by(bookings.c.created_at.desc(), bookings.c.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_booking(row) for row in result.mappings().all()]

    async def list_page(self, offset: int, limit: int) -> Sequence[Booking]:
        stmt = (
            select(bookings)
            .order_by(bookings.c.created_at.desc(), bookings.c.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._map_booking(row) for row in result.mappings().all()]

    async def count(
        self,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> int:
        stmt = select(func.count()).select_from(bookings)
        if created_from is not None:
            stmt = stmt.where(bookings.c.created_at >= created_from)
        if created_to is not None:
            stmt = stmt.where(bookings.c.created_at < created_to)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def delete(self, booking_id: str) -> bool:
        result = await self._session.execute(delete(bookings).where(bookings.c.id == booking_id))
        return result.rowcount > 0

    async def _fetch_one(self, stmt) -> Booking | None:
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return self._map_booking(row) if row else None

    def _map_booking(self, row) -> Booking:
        return Booking(
            id=row["id"],
            user_id=row.get("user_id"),
            user_email=row.get("user_email"),
            item_type=row["item_type"],
            item_id=row["item_id"],
            item_title=row["item_title"],
            start_date=as_utc(row.get("start_date")),
            nights=row.get("nights"),
            guests=row["guests"],
            note=row.get("note") or "",
            amount=row["amount"],
            currency=row["currency"],
            payment_id=row["payment_id"],
            status=row["status"],
            created_at=as_utc(row["created_at"]),
        )

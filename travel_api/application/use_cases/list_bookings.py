from travel_api.application.interfaces.booking_repo import BookingRepo
from travel_api.application.pagination import Page, normalize_paging
from travel_api.domain.entities.booking import Booking

DEFAULT_BOOKINGS_PAGE_SIZE = 20


class ListBookingsUseCase:
    """Admin listing of every booking, newest first."""

    def __init__(self, booking_repo: BookingRepo) -> None:
        self._booking_repo = booking_repo

    async def execute(self, page: int | None = None, limit: int | None = None) -> Page[Booking]:
        page, limit = normalize_paging(page, limit, DEFAULT_BOOKINGS_PAGE_SIZE)
        items = await self._booking_repo.list_page(offset=(page - 1) * limit, limit=limit)
        total = await self._booking_repo.count()
        return Page(items=items, total=total, page=page, limit=limit)

import math
from dataclasses import dataclass
from datetime import timedelta

from travel_api.application.interfaces.booking_repo import BookingRepo
from travel_api.application.interfaces.catalog_repo import CatalogRepo
from travel_api.application.interfaces.clock import Clock
from travel_api.application.interfaces.user_repo import UserRepo
from travel_api.domain.constants import ITEM_TYPE_PACKAGE, ITEM_TYPE_RESORT, MAX_OVERVIEW_DAYS
from travel_api.domain.errors import ValidationError

DEFAULT_OVERVIEW_DAYS = 30


def percent_change(current: int, previous: int) -> int:
    if previous == 0:
        return 0 if current == 0 else 100
    # Halves round up, matching the dashboard client.
    return math.floor((current - previous) / previous * 100 + 0.5)


@dataclass(frozen=True)
class AdminOverview:
    days: int
    total_bookings: int
    prev_bookings: int
    bookings_change_percent: int
    total_users: int
    new_users: int
    users_change_percent: int
    packages_count: int
    resorts_count: int


class AdminOverviewUseCase:
    """
    Dashboard counters.

    Bookings and new users are counted in the window [now - days, now) and
    compared against the window of the same length just before it.
    """

    def __init__(
        self,
        booking_repo: BookingRepo,
        user_repo: UserRepo,
        catalog_repo: CatalogRepo,
        clock: Clock,
    ) -> None:
        self._booking_repo = booking_repo
        self._user_repo = user_repo
        self._catalog_repo = catalog_repo
        self._clock = clock

    async def execute(self, days: int | None = None) -> AdminOverview:
        days = DEFAULT_OVERVIEW_DAYS if days is None else days
        if not 1 <= days <= MAX_OVERVIEW_DAYS:
            raise ValidationError("days", f"days must be between 1 and {MAX_OVERVIEW_DAYS}")

        now = self._clock.now()
        window_start = now - timedelta(days=days)
        prev_start = now - timedelta(days=2 * days)

        total_bookings = await self._booking_repo.count(window_start, now)
        prev_bookings = await self._booking_repo.count(prev_start, window_start)
        new_users = await self._user_repo.count(window_start, now)
        prev_users = await self._user_repo.count(prev_start, window_start)

        return AdminOverview(
            days=days,
            total_bookings=total_bookings,
            prev_bookings=prev_bookings,
            bookings_change_percent=percent_change(total_bookings, prev_bookings),
            total_users=await self._user_repo.count(),
            new_users=new_users,
            users_change_percent=percent_change(new_users, prev_users),
            packages_count=await self._catalog_repo.count(ITEM_TYPE_PACKAGE),
            resorts_count=await self._catalog_repo.count(ITEM_TYPE_RESORT),
        )

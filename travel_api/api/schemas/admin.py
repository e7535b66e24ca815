from travel_api.api.schemas.common import ApiModel
from travel_api.application.use_cases.admin_overview import AdminOverview


class AdminOverviewResponse(ApiModel):
    days: int
    total_bookings: int
    prev_bookings: int
    bookings_change_percent: int
    total_users: int
    new_users: int
    users_change_percent: int
    packages_count: int
    resorts_count: int

    @classmethod
    def from_overview(cls, overview: AdminOverview) -> "AdminOverviewResponse":
        return cls(
            days=overview.days,
            total_bookings=overview.total_bookings,
            prev_bookings=overview.prev_bookings,
            bookings_change_percent=overview.bookings_change_percent,
            total_users=overview.total_users,
            new_users=overview.new_users,
            users_change_percent=overview.users_change_percent,
            packages_count=overview.packages_count,
            resorts_count=overview.resorts_count,
        )

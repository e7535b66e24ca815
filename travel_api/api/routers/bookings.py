from fastapi import APIRouter, Depends, Query

from travel_api.api.dependencies import get_current_identity, get_use_cases, require_admin
from travel_api.api.schemas.bookings import BookingListResponse, BookingResponse
from travel_api.api.schemas.common import MessageResponse
from travel_api.application.interfaces.identity_verifier import CallerIdentity

router = APIRouter()


# /bookings/user must be registered before /bookings/{booking_id}.
@router.get("/bookings/user", response_model=list[BookingResponse])
async def list_my_bookings(
    caller: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> list[BookingResponse]:
    bookings = await use_cases["list_user_bookings"].execute(caller)
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.get("/bookings", response_model=BookingListResponse)
async def list_bookings(
    page: int | None = Query(default=None),
    limit: int | None = Query(default=None),
    _: CallerIdentity = Depends(require_admin),
    use_cases=Depends(get_use_cases),
) -> BookingListResponse:
    result = await use_cases["list_bookings"].execute(page=page, limit=limit)
    return BookingListResponse(
        bookings=[BookingResponse.from_entity(booking) for booking in result.items],
        total=result.total,
        page=result.page,
        pages=result.pages,
    )


@router.get("/bookings/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    _: CallerIdentity = Depends(require_admin),
    use_cases=Depends(get_use_cases),
) -> BookingResponse:
    booking = await use_cases["get_booking"].execute(booking_id)
    return BookingResponse.from_entity(booking)


@router.delete("/bookings/{booking_id}", response_model=MessageResponse)
async def delete_booking(
    booking_id: str,
    caller: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> MessageResponse:
    await use_cases["delete_booking"].execute(booking_id, caller)
    return MessageResponse(message="Booking removed")

from fastapi import APIRouter, Depends

from travel_api.api.dependencies import get_current_identity, get_use_cases
from travel_api.api.schemas.bookings import ConfirmBookingRequest, ConfirmBookingResponse
from travel_api.api.schemas.payments import CreatePaymentIntentRequest, CreatePaymentIntentResponse
from travel_api.application.interfaces.identity_verifier import CallerIdentity
from travel_api.domain.pricing import QuantityParams

router = APIRouter()


@router.post("/create-payment-intent", response_model=CreatePaymentIntentResponse)
async def create_payment_intent(
    payload: CreatePaymentIntentRequest,
    caller: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> CreatePaymentIntentResponse:
    intent = await use_cases["create_payment_intent"].execute(
        item_type=payload.item_type,
        item_id=payload.item_id,
        quantities=QuantityParams(guests=payload.guests, nights=payload.nights),
        caller=caller,
    )
    return CreatePaymentIntentResponse(
        client_secret=intent.client_secret,
        amount=intent.amount,
        currency=intent.currency,
    )


@router.post("/bookings/confirm", response_model=ConfirmBookingResponse)
async def confirm_booking(
    payload: ConfirmBookingRequest,
    caller: CallerIdentity = Depends(get_current_identity),
    use_cases=Depends(get_use_cases),
) -> ConfirmBookingResponse:
    booking = await use_cases["confirm_booking"].execute(
        payment_id=payload.payment_intent_id,
        item_type=payload.item_type,
        item_id=payload.item_id,
        quantities=QuantityParams(guests=payload.guests, nights=payload.nights),
        caller=caller,
        start_date=payload.start_date,
        note=payload.note,
    )
    return ConfirmBookingResponse(message="Booking confirmed", booking_id=booking.id)

import logging
from datetime import datetime, timezone

from travel_api.application.interfaces.booking_repo import BookingRepo
from travel_api.application.interfaces.catalog_repo import CatalogRepo
from travel_api.application.interfaces.clock import Clock
from travel_api.application.interfaces.identity_verifier import CallerIdentity
from travel_api.application.interfaces.stripe_gateway import StripeGateway
from travel_api.application.interfaces.transaction_manager import TransactionManager
from travel_api.application.use_cases.catalog_lookup import find_catalog_item
from travel_api.domain.constants import BOOKING_STATUS_PAID, ITEM_TYPE_RESORT
from travel_api.domain.entities.booking import Booking
from travel_api.domain.errors import (
    AmountMismatchError,
    BookingAlreadyConfirmedError,
    ForbiddenError,
    PaymentItemMismatchError,
    PaymentNotFoundError,
    PaymentNotSucceededError,
    ValidationError,
)
from travel_api.domain.identifiers import new_id
from travel_api.domain.pricing import QuantityParams, expected_minor_amount


def _parse_start_date(raw: str | None) -> datetime | None:
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError("startDate", "startDate must be an ISO-8601 date") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ConfirmBookingUseCase:
    """
    Turns a succeeded payment into exactly one booking.

    The charge reported by Stripe must equal the price recomputed from the
    catalog; the client never supplies an amount. Duplicate confirmations of
    the same payment fail with BookingAlreadyConfirmedError, backed by the
    unique payment id in the booking store. When the intent carries item and
    user metadata, the request must match it.
    """

    def __init__(
        self,
        catalog_repo: CatalogRepo,
        booking_repo: BookingRepo,
        stripe_gateway: StripeGateway,
        transaction_manager: TransactionManager,
        clock: Clock,
        currency: str,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._booking_repo = booking_repo
        self._stripe_gateway = stripe_gateway
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._currency = currency.lower()
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        payment_id: str,
        item_type: str,
        item_id: str,
        quantities: QuantityParams,
        caller: CallerIdentity,
        start_date: str | None = None,
        note: str | None = None,
    ) -> Booking:
        parsed_start = _parse_start_date(start_date)

        existing = await self._booking_repo.find_by_payment(payment_id)
        if existing:
            raise BookingAlreadyConfirmedError(payment_id, existing.id)

        payment = await self._stripe_gateway.retrieve_payment_intent(payment_id)
        if payment is None:
            raise PaymentNotFoundError(payment_id)
        if not payment.is_succeeded:
            raise PaymentNotSucceededError(payment_id, payment.status)

        owner_email = payment.metadata.get("userEmail")
        if owner_email and owner_email != caller.email:
            self._logger.warning(
                "Payment confirmed by a different caller",
                extra={"payment_intent_id": payment_id, "caller_uid": caller.uid},
            )
            raise ForbiddenError("Payment belongs to another user")

        item = await find_catalog_item(self._catalog_repo, item_type, item_id)
        paid_type = payment.metadata.get("itemType")
        paid_id = payment.metadata.get("itemId")
        if (paid_type and paid_type != item_type) or (paid_id and paid_id != str(item.id)):
            self._logger.warning(
                "Payment item mismatch",
                extra={"payment_intent_id": payment_id, "item_type": item_type, "item_id": item.id},
            )
            raise PaymentItemMismatchError(payment_id)

        expected_amount = expected_minor_amount(item, quantities, self._currency)

        if payment.amount != expected_amount or payment.currency.lower() != self._currency:
            self._logger.warning(
                "Payment amount mismatch",
                extra={
                    "payment_intent_id": payment_id,
                    "charged_amount": payment.amount,
                    "charged_currency": payment.currency,
                    "expected_amount": expected_amount,
                    "expected_currency": self._currency,
                    "item_id": item.id,
                },
            )
            raise AmountMismatchError(
                payment_id=payment_id,
                charged_amount=payment.amount,
                charged_currency=payment.currency,
                expected_amount=expected_amount,
                expected_currency=self._currency,
            )

        charged = payment.money
        booking = Booking(
            id=new_id(),
            user_id=caller.uid,
            user_email=caller.email,
            item_type=item_type,
            item_id=str(item.id),
            item_title=item.display_title,
            start_date=parsed_start,
            nights=(
                quantities.night_count
                if item_type == ITEM_TYPE_RESORT or quantities.has_nights
                else None
            ),
            guests=quantities.guest_count,
            note=note or "",
            amount=charged.amount,
            currency=charged.currency_code,
            payment_id=payment.id,
            status=BOOKING_STATUS_PAID,
            created_at=self._clock.now(),
        )

        async with self._transaction_manager.start():
            booking = await self._booking_repo.add(booking)

        self._logger.info(
            "Booking confirmed",
            extra={
                "booking_id": booking.id,
                "payment_intent_id": payment.id,
                "item_type": item_type,
                "item_id": booking.item_id,
            },
        )
        return booking

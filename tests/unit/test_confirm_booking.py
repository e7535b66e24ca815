from datetime import datetime, timezone
from decimal import Decimal

import pytest

from travel_api.application.interfaces.clock import FakeClock
from travel_api.application.interfaces.identity_verifier import CallerIdentity
from travel_api.application.use_cases.confirm_booking import ConfirmBookingUseCase
from travel_api.application.use_cases.create_payment_intent import CreatePaymentIntentUseCase
from travel_api.domain.constants import PAYMENT_STATUS_PENDING
from travel_api.domain.entities.catalog import Package, Resort
from travel_api.domain.errors import (
    AmountMismatchError,
    BookingAlreadyConfirmedError,
    ForbiddenError,
    ItemNotFoundError,
    PaymentItemMismatchError,
    PaymentNotFoundError,
    PaymentNotSucceededError,
    ValidationError,
)
from travel_api.domain.pricing import QuantityParams
from travel_api.infrastructure.in_memory import (
    InMemoryBookingRepo,
    InMemoryCatalogRepo,
    NoopTransactionManager,
    StubStripeGateway,
)

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
CALLER = CallerIdentity(uid="uid-alice", email="alice@example.com")


@pytest.fixture
async def catalog_repo():
    repo = InMemoryCatalogRepo()
    await repo.add(Package(id="pkg500", title="Mangrove Expedition", price=Decimal("500"), created_at=NOW))
    await repo.add(
        Resort(
            id="resort150",
            name="Sea Pearl",
            location="Coast",
            price_per_night=Decimal("150"),
            created_at=NOW,
        )
    )
    return repo


@pytest.fixture
def booking_repo():
    return InMemoryBookingRepo()


@pytest.fixture
def gateway():
    return StubStripeGateway()


@pytest.fixture
def confirm(catalog_repo, booking_repo, gateway):
    return ConfirmBookingUseCase(
        catalog_repo=catalog_repo,
        booking_repo=booking_repo,
        stripe_gateway=gateway,
        transaction_manager=NoopTransactionManager(),
        clock=FakeClock(NOW),
        currency="usd",
    )


async def test_confirm_succeeds_when_charge_matches(confirm, gateway, booking_repo):
    payment = gateway.add_payment(amount=100000)

    booking = await confirm.execute(
        payment_id=payment.id,
        item_type="package",
        item_id="pkg500",
        quantities=QuantityParams(guests=2),
        caller=CALLER,
        start_date="2026-04-10",
        note="Window seat",
    )

    assert booking.amount == Decimal("1000.00")
    assert booking.currency == "usd"
    assert booking.status == "paid"
    assert booking.item_title == "Mangrove Expedition"
    assert booking.user_email == "alice@example.com"
    assert booking.user_id == "uid-alice"
    assert booking.guests == 2
    assert booking.nights is None
    assert booking.start_date == datetime(2026, 4, 10, tzinfo=timezone.utc)
    assert booking.created_at == NOW
    assert await booking_repo.get(booking.id) == booking


async def test_confirm_fails_on_amount_mismatch_without_booking(confirm, gateway, booking_repo):
    payment = gateway.add_payment(amount=50000)

    with pytest.raises(AmountMismatchError) as exc_info:
        await confirm.execute(
            payment_id=payment.id,
            item_type="package",
            item_id="pkg500",
            quantities=QuantityParams(guests=2),
            caller=CALLER,
        )

    assert exc_info.value.expected_amount == 100000
    assert exc_info.value.charged_amount == 50000
    assert await booking_repo.count() == 0


async def test_confirm_fails_on_currency_mismatch(confirm, gateway, booking_repo):
    payment = gateway.add_payment(amount=100000, currency="eur")

    with pytest.raises(AmountMismatchError):
        await confirm.execute(
            payment_id=payment.id,
            item_type="package",
            item_id="pkg500",
            quantities=QuantityParams(guests=2),
            caller=CALLER,
        )
    assert await booking_repo.count() == 0


async def test_second_confirm_of_same_payment_is_rejected(confirm, gateway, booking_repo):
    payment = gateway.add_payment(amount=30000)
    kwargs = dict(
        payment_id=payment.id,
        item_type="resort",
        item_id="resort150",
        quantities=QuantityParams(nights=2),
        caller=CALLER,
    )

    first = await confirm.execute(**kwargs)
    with pytest.raises(BookingAlreadyConfirmedError) as exc_info:
        await confirm.execute(**kwargs)

    assert exc_info.value.booking_id == first.id
    assert await booking_repo.count() == 1


async def test_store_rejects_duplicate_payment_even_past_the_precheck(
    confirm, gateway, booking_repo, monkeypatch
):
    payment = gateway.add_payment(amount=15000)
    kwargs = dict(
        payment_id=payment.id,
        item_type="resort",
        item_id="resort150",
        quantities=QuantityParams(),
        caller=CALLER,
    )
    await confirm.execute(**kwargs)

    # Simulate a concurrent request that passed the lookup before the first insert.
    async def _no_existing(payment_id):
        return None

    monkeypatch.setattr(booking_repo, "find_by_payment", _no_existing)
    with pytest.raises(BookingAlreadyConfirmedError):
        await confirm.execute(**kwargs)
    assert await booking_repo.count() == 1


async def test_resort_booking_records_nights(confirm, gateway):
    payment = gateway.add_payment(amount=45000)

    booking = await confirm.execute(
        payment_id=payment.id,
        item_type="resort",
        item_id="resort150",
        quantities=QuantityParams(nights="3"),
        caller=CALLER,
    )

    assert booking.nights == 3
    assert booking.guests == 1
    assert booking.item_title == "Sea Pearl"


async def test_unknown_payment_fails(confirm):
    with pytest.raises(PaymentNotFoundError):
        await confirm.execute(
            payment_id="pi_missing",
            item_type="package",
            item_id="pkg500",
            quantities=QuantityParams(),
            caller=CALLER,
        )


async def test_pending_payment_fails(confirm, gateway, booking_repo):
    payment = gateway.add_payment(amount=50000, status=PAYMENT_STATUS_PENDING)

    with pytest.raises(PaymentNotSucceededError):
        await confirm.execute(
            payment_id=payment.id,
            item_type="package",
            item_id="pkg500",
            quantities=QuantityParams(),
            caller=CALLER,
        )
    assert await booking_repo.count() == 0


async def test_failed_payment_fails(confirm, gateway, booking_repo):
    payment = gateway.add_payment(amount=50000, status=PAYMENT_STATUS_PENDING)
    gateway.mark_failed(payment.id)

    with pytest.raises(PaymentNotSucceededError) as excinfo:
        await confirm.execute(
            payment_id=payment.id,
            item_type="package",
            item_id="pkg500",
            quantities=QuantityParams(),
            caller=CALLER,
        )
    assert excinfo.value.current_status == "failed"
    assert await booking_repo.count() == 0


async def test_package_booking_never_stores_negative_nights(confirm, gateway):
    first = gateway.add_payment(amount=50000)
    second = gateway.add_payment(amount=50000)

    with_nights = await confirm.execute(
        payment_id=first.id,
        item_type="package",
        item_id="pkg500",
        quantities=QuantityParams(nights=-5),
        caller=CALLER,
    )
    without_nights = await confirm.execute(
        payment_id=second.id,
        item_type="package",
        item_id="pkg500",
        quantities=QuantityParams(),
        caller=CALLER,
    )

    assert with_nights.nights == 1
    assert without_nights.nights is None


async def _succeeded_intent(gateway, item_type, item_id, email="alice@example.com"):
    intent = await gateway.create_payment_intent(
        amount=50000,
        currency="usd",
        metadata={"itemType": item_type, "itemId": item_id, "userEmail": email},
    )
    gateway.mark_succeeded(intent.id)
    return intent


async def test_payment_of_another_user_is_forbidden(confirm, gateway, booking_repo):
    intent = await _succeeded_intent(gateway, "package", "pkg500")

    with pytest.raises(ForbiddenError):
        await confirm.execute(
            payment_id=intent.id,
            item_type="package",
            item_id="pkg500",
            quantities=QuantityParams(),
            caller=CallerIdentity(uid="uid-mallory", email="mallory@example.com"),
        )
    assert await booking_repo.count() == 0


async def test_payment_for_another_item_is_rejected(confirm, catalog_repo, gateway, booking_repo):
    await catalog_repo.add(Package(id="pkg500b", title="Twin Trip", price=Decimal("500"), created_at=NOW))
    intent = await _succeeded_intent(gateway, "package", "pkg500")

    with pytest.raises(PaymentItemMismatchError):
        await confirm.execute(
            payment_id=intent.id,
            item_type="package",
            item_id="pkg500b",
            quantities=QuantityParams(),
            caller=CALLER,
        )
    assert await booking_repo.count() == 0


async def test_payment_metadata_matching_request_confirms(confirm, gateway):
    intent = await _succeeded_intent(gateway, "package", "pkg500")

    booking = await confirm.execute(
        payment_id=intent.id,
        item_type="package",
        item_id="pkg500",
        quantities=QuantityParams(),
        caller=CALLER,
    )

    assert booking.payment_id == intent.id


async def test_unknown_item_fails(confirm, gateway):
    payment = gateway.add_payment(amount=50000)

    with pytest.raises(ItemNotFoundError):
        await confirm.execute(
            payment_id=payment.id,
            item_type="package",
            item_id="missing",
            quantities=QuantityParams(),
            caller=CALLER,
        )


async def test_invalid_start_date_fails_before_any_lookup(confirm, gateway):
    payment = gateway.add_payment(amount=50000)

    with pytest.raises(ValidationError):
        await confirm.execute(
            payment_id=payment.id,
            item_type="package",
            item_id="pkg500",
            quantities=QuantityParams(),
            caller=CALLER,
            start_date="next tuesday",
        )


async def test_create_intent_charges_recomputed_amount(catalog_repo, gateway):
    use_case = CreatePaymentIntentUseCase(catalog_repo=catalog_repo, stripe_gateway=gateway, currency="USD")

    intent = await use_case.execute(
        item_type="package",
        item_id="pkg500",
        quantities=QuantityParams(guests=2),
        caller=CALLER,
    )

    assert intent.amount == 100000
    assert intent.currency == "usd"
    assert intent.client_secret
    assert gateway.create_calls == [
        {
            "amount": 100000,
            "currency": "usd",
            "metadata": {"itemType": "package", "itemId": "pkg500", "userEmail": "alice@example.com"},
        }
    ]


async def test_create_intent_rejects_unpriced_item(catalog_repo, gateway):
    await catalog_repo.add(Package(id="free", title="Free walk", created_at=NOW))
    use_case = CreatePaymentIntentUseCase(catalog_repo=catalog_repo, stripe_gateway=gateway, currency="usd")

    with pytest.raises(ValidationError):
        await use_case.execute(
            item_type="package",
            item_id="free",
            quantities=QuantityParams(),
            caller=CALLER,
        )
    assert gateway.create_calls == []


async def test_create_intent_unknown_item_type(catalog_repo, gateway):
    use_case = CreatePaymentIntentUseCase(catalog_repo=catalog_repo, stripe_gateway=gateway, currency="usd")

    with pytest.raises(ValidationError):
        await use_case.execute(
            item_type="cruise",
            item_id="pkg500",
            quantities=QuantityParams(),
            caller=CALLER,
        )

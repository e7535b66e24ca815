from uuid import uuid4

from travel_api.application.interfaces.stripe_gateway import StripeGateway
from travel_api.domain.constants import (
    PAYMENT_STATUS_FAILED,
    PAYMENT_STATUS_PENDING,
    PAYMENT_STATUS_SUCCEEDED,
)
from travel_api.domain.entities.payment import PaymentRecord


class StubStripeGateway(StripeGateway):
    """
    In-memory payment authority.

    Intents start pending; the client-side payment step is simulated with
    `mark_succeeded` / `mark_failed`.
    """

    def __init__(self) -> None:
        self.intents: dict[str, PaymentRecord] = {}
        self.create_calls: list[dict] = []

    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: dict[str, str],
    ) -> PaymentRecord:
        intent_id = f"pi_{uuid4().hex[:24]}"
        record = PaymentRecord(
            id=intent_id,
            amount=amount,
            currency=currency.lower(),
            status=PAYMENT_STATUS_PENDING,
            client_secret=f"{intent_id}_secret_{uuid4().hex[:16]}",
            metadata=dict(metadata),
        )
        self.intents[intent_id] = record
        self.create_calls.append({"amount": amount, "currency": currency, "metadata": dict(metadata)})
        return record

    async def retrieve_payment_intent(self, payment_id: str) -> PaymentRecord | None:
        return self.intents.get(payment_id)

    def mark_succeeded(self, payment_id: str) -> None:
        self.intents[payment_id].status = PAYMENT_STATUS_SUCCEEDED

    def mark_failed(self, payment_id: str) -> None:
        self.intents[payment_id].status = PAYMENT_STATUS_FAILED

    def add_payment(
        self,
        amount: int,
        currency: str = "usd",
        status: str = PAYMENT_STATUS_SUCCEEDED,
        payment_id: str | None = None,
    ) -> PaymentRecord:
        """Register a payment that did not go through `create_payment_intent`."""
        record = PaymentRecord(
            id=payment_id or f"pi_{uuid4().hex[:24]}",
            amount=amount,
            currency=currency,
            status=status,
        )
        self.intents[record.id] = record
        return record

from travel_api.domain.entities.payment import PaymentRecord


class StripeGateway:
    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: dict[str, str],
    ) -> PaymentRecord:
        """Reserve a charge of `amount` minor units; returns the pending intent."""
        raise NotImplementedError

    async def retrieve_payment_intent(self, payment_id: str) -> PaymentRecord | None:
        """Authoritative state of a payment, or None when it does not exist."""
        raise NotImplementedError

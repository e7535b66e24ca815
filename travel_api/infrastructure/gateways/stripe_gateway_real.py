import asyncio
import logging

import stripe
from pybreaker import CircuitBreaker

from travel_api.application.interfaces.stripe_gateway import StripeGateway
from travel_api.domain.entities.payment import PaymentRecord
from travel_api.domain.errors import PaymentGatewayError
from travel_api.infrastructure.circuit_breaker import CircuitBreakerError, stripe_breaker

logger = logging.getLogger(__name__)


class StripeGatewayReal(StripeGateway):
    """
    Payment authority backed by the Stripe API.

    The SDK is synchronous, so calls run in a worker thread. Network retries
    are disabled: a failed call surfaces as PaymentGatewayError right away.
    """

    def __init__(
        self,
        api_key: str | None,
        timeout_seconds: float = 10.0,
        client: stripe.StripeClient | None = None,
        breaker: CircuitBreaker = stripe_breaker,
    ) -> None:
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._client = client
        self._breaker = breaker

    def _get_client(self) -> stripe.StripeClient:
        if self._client is None:
            if not self._api_key:
                raise PaymentGatewayError("Stripe is not configured")
            self._client = stripe.StripeClient(
                self._api_key,
                max_network_retries=0,
                http_client=stripe.RequestsClient(timeout=self._timeout_seconds),
            )
        return self._client

    async def _call(self, func, *args, **kwargs):
        try:
            return await asyncio.to_thread(self._breaker.call, func, *args, **kwargs)
        except CircuitBreakerError as exc:
            logger.error("Stripe circuit breaker is open - service unavailable")
            raise PaymentGatewayError() from exc

    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: dict[str, str],
    ) -> PaymentRecord:
        client = self._get_client()
        try:
            intent = await self._call(
                client.payment_intents.create,
                params={
                    "amount": amount,
                    "currency": currency.lower(),
                    "metadata": metadata,
                    "automatic_payment_methods": {"enabled": True},
                },
            )
        except stripe.StripeError as exc:
            logger.error("Stripe API error", exc_info=exc, extra={"amount": amount})
            raise PaymentGatewayError(exc.user_message or "Payment provider error") from exc
        return self._map_intent(intent)

    async def retrieve_payment_intent(self, payment_id: str) -> PaymentRecord | None:
        client = self._get_client()
        try:
            intent = await self._call(client.payment_intents.retrieve, payment_id)
        except stripe.InvalidRequestError as exc:
            if exc.code == "resource_missing":
                return None
            logger.error("Stripe rejected retrieve", exc_info=exc, extra={"payment_intent_id": payment_id})
            raise PaymentGatewayError(exc.user_message or "Invalid payment reference") from exc
        except stripe.StripeError as exc:
            logger.error("Stripe API error", exc_info=exc, extra={"payment_intent_id": payment_id})
            raise PaymentGatewayError() from exc
        return self._map_intent(intent)

    def _map_intent(self, intent) -> PaymentRecord:
        metadata = dict(intent.metadata or {})
        return PaymentRecord(
            id=intent.id,
            amount=intent.amount,
            currency=intent.currency,
            status=intent.status,
            client_secret=intent.client_secret,
            metadata=metadata,
        )

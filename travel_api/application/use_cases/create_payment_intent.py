import logging

from travel_api.application.interfaces.catalog_repo import CatalogRepo
from travel_api.application.interfaces.identity_verifier import CallerIdentity
from travel_api.application.interfaces.stripe_gateway import StripeGateway
from travel_api.application.use_cases.catalog_lookup import find_catalog_item
from travel_api.domain.entities.payment import PaymentRecord
from travel_api.domain.errors import ValidationError
from travel_api.domain.pricing import QuantityParams, expected_minor_amount


class CreatePaymentIntentUseCase:
    def __init__(
        self,
        catalog_repo: CatalogRepo,
        stripe_gateway: StripeGateway,
        currency: str,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._stripe_gateway = stripe_gateway
        self._currency = currency.lower()
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        item_type: str,
        item_id: str,
        quantities: QuantityParams,
        caller: CallerIdentity,
    ) -> PaymentRecord:
        item = await find_catalog_item(self._catalog_repo, item_type, item_id)

        amount = expected_minor_amount(item, quantities, self._currency)
        if amount <= 0:
            # Stripe rejects zero-amount intents; fail before calling it.
            raise ValidationError("itemId", "Item has no price")

        intent = await self._stripe_gateway.create_payment_intent(
            amount=amount,
            currency=self._currency,
            metadata={
                "itemType": item_type,
                "itemId": str(item.id),
                "userEmail": caller.email or "",
            },
        )
        self._logger.info(
            "Payment intent created",
            extra={
                "payment_intent_id": intent.id,
                "item_type": item_type,
                "item_id": item.id,
                "amount": amount,
            },
        )
        return intent

from typing import Literal

from pydantic import Field

from travel_api.api.schemas.bookings import Quantity
from travel_api.api.schemas.common import ApiModel


class CreatePaymentIntentRequest(ApiModel):
    item_type: Literal["package", "resort"]
    item_id: str = Field(min_length=1)
    nights: Quantity = None
    guests: Quantity = None


class CreatePaymentIntentResponse(ApiModel):
    client_secret: str | None
    amount: int = Field(description="Minor currency units")
    currency: str

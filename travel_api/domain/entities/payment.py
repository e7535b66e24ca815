"""PaymentRecord - the payment authority's view of a charge."""

from dataclasses import dataclass, field

from travel_api.domain.constants import PAYMENT_STATUS_SUCCEEDED
from travel_api.domain.value_objects.money import Money


@dataclass
class PaymentRecord:
    """
    Read-only snapshot of a payment as reported by the authority.

    `amount` is in minor currency units; `status` is the authority's raw
    status string.
    """

    id: str
    amount: int
    currency: str
    status: str
    client_secret: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def is_succeeded(self) -> bool:
        return self.status == PAYMENT_STATUS_SUCCEEDED

    @property
    def money(self) -> Money:
        return Money.from_minor_units(self.amount, self.currency)

"""
Circuit Breaker for calls to the payment authority.

CLOSED: requests pass through. OPEN: after `fail_max` consecutive failures
requests fail immediately for `reset_timeout` seconds. HALF_OPEN: one trial
request decides whether the circuit closes again.

Client errors (unknown payment id, declined card) say nothing about Stripe's
health and are excluded from the failure count.
"""

import logging

import stripe
from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

logger = logging.getLogger(__name__)


class StateChangeLogger(CircuitBreakerListener):
    def __init__(self, name: str):
        self.name = name

    def state_change(self, cb, old_state, new_state):
        logger.warning(
            "Circuit breaker state changed",
            extra={
                "breaker_name": self.name,
                "old_state": old_state.name if old_state else None,
                "new_state": new_state.name,
            },
        )


def build_stripe_breaker(fail_max: int = 5, reset_timeout: int = 60) -> CircuitBreaker:
    return CircuitBreaker(
        fail_max=fail_max,
        reset_timeout=reset_timeout,
        exclude=[stripe.InvalidRequestError, stripe.CardError],
        listeners=[StateChangeLogger("stripe")],
        name="stripe_circuit_breaker",
    )


stripe_breaker = build_stripe_breaker()


__all__ = [
    "stripe_breaker",
    "build_stripe_breaker",
    "CircuitBreakerError",
]

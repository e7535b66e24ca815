"""Domain value objects."""

from travel_api.domain.value_objects.money import Money

__all__ = [
    "Money",
]

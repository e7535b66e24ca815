import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from travel_api.domain.constants import MAX_PAGE, MAX_PAGE_SIZE

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    items: Sequence[T]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


def normalize_paging(page: int | None, limit: int | None, default_limit: int) -> tuple[int, int]:
    """Clamp page to [1, MAX_PAGE] and limit to [1, MAX_PAGE_SIZE]; missing values use defaults."""
    page = min(max(1, page or 1), MAX_PAGE)
    limit = min(max(1, limit or default_limit), MAX_PAGE_SIZE)
    return page, limit

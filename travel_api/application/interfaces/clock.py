"""Clock port - abstracts the system time."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone


class Clock(ABC):
    """
    Source of the current time.

    Lets tests inject a fixed time for deterministic timestamps and
    reporting windows.
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Current date/time.

        Returns:
            timezone-aware datetime in UTC.
        """
        raise NotImplementedError


class SystemClock(Clock):
    """Real implementation backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock(Clock):
    """
    Fake implementation for testing.

    Returns a fixed time until moved with `set_time` or `advance`.
    """

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = new_time

    def advance(self, seconds: int = 0, minutes: int = 0, hours: int = 0, days: int = 0) -> None:
        delta = timedelta(seconds=seconds, minutes=minutes, hours=hours, days=days)
        self._fixed_time = self._fixed_time + delta

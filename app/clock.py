"""Clocks that supply the current instant."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Port for reading the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Get the current instant as an aware UTC datetime."""


class SystemClock(Clock):
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock that always reports the same instant."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise ValueError("FixedClock needs a timezone-aware datetime")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

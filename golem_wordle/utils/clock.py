"""
Clock Abstractions

The game never reads the wall clock directly; it asks a clock. RealClock is
used when serving players, ManualClock lets idle-time behaviour be driven
without waiting.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional


class Clock(ABC):
    """Source of the current time (timezone-aware, UTC)."""

    @abstractmethod
    def now(self) -> datetime:
        pass


class RealClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class ManualClock(Clock):
    """A clock that only moves when told to."""

    def __init__(self, start: Optional[datetime] = None):
        self._time = start or datetime.now(timezone.utc)

    @classmethod
    def at(cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> 'ManualClock':
        return cls(datetime(year, month, day, hour, minute, tzinfo=timezone.utc))

    def now(self) -> datetime:
        return self._time

    def advance(self, delta: timedelta) -> None:
        self._time = self._time + delta

    def reset(self, time: datetime) -> None:
        self._time = time

"""
Clock - Source of "now" for every time-relative query.

Schedules never read the wall clock directly. They sample the clock they
were constructed with, once per operation, so tests can pin time with a
FixedClock and the API can run on a UTC clock.
"""

from datetime import datetime, timedelta, tzinfo
from typing import Protocol


class Clock(Protocol):
    """Anything that returns the current instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """
    Wall clock.

    With tz=None the clock is naive local time (datetime.now()); pass a
    tzinfo (e.g. UTC) when the slots it is compared against are aware.
    """

    def __init__(self, tz: tzinfo | None = None):
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self.tz!r})"


class FixedClock:
    """Manually driven clock for tests and simulations."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def advance(self, delta: timedelta | None = None, **kwargs) -> datetime:
        """Move the clock forward by delta (or timedelta(**kwargs)) and return the new instant."""
        self._instant += delta if delta is not None else timedelta(**kwargs)
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"

"""
Test fixtures for deterministic scheduling tests.

All slots are built relative to NOW, the instant the test FixedClock is
pinned to.
"""

from datetime import UTC, datetime, timedelta

from laundry_os.time_truth import TimeSlot

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)


def at(minutes: float) -> datetime:
    """NOW shifted by a number of minutes (negative for the past)."""
    return NOW + timedelta(minutes=minutes)


def slot(start_min: float, end_min: float) -> TimeSlot:
    """TimeSlot from NOW+start_min to NOW+end_min."""
    return TimeSlot(at(start_min), at(end_min))


__all__ = ["NOW", "at", "slot"]

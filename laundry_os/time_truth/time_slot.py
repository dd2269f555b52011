"""
TimeSlot - An immutable half-open interval [start, end).

The start instant is inclusive and the end instant exclusive, so a slot from
12:00 to 13:00 covers 12:00 up to but not including 13:00, and a slot ending
at 13:00 never overlaps one starting at 13:00.

Invariants (checked at construction):
- start and end are datetimes, both naive or both timezone-aware
- start < end
- end - start <= 24 hours

Ordering predicates compare start only. That is a total preorder, not a
total order: two slots with the same start and different ends are each
"less than or equal" to the other. Do not key sorted containers on them.

Aware endpoints are stored in UTC, so durations and comparisons measure
elapsed time even across a DST change.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from .errors import DurationError, InvalidTimeError, OrderingError

MAX_DURATION = timedelta(hours=24)


def is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None


@dataclass(frozen=True)
class TimeSlot:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.start, datetime):
            raise InvalidTimeError(f"The start time is not valid: {self.start!r}")
        if not isinstance(self.end, datetime):
            raise InvalidTimeError(f"The end time is not valid: {self.end!r}")
        if is_aware(self.start) != is_aware(self.end):
            raise InvalidTimeError("The start and end times must both be naive or both be timezone-aware.")
        if is_aware(self.start):
            object.__setattr__(self, "start", self.start.astimezone(UTC))
            object.__setattr__(self, "end", self.end.astimezone(UTC))

        if self.start >= self.end:
            raise OrderingError("The start time must be before the end time.")

        if self.end - self.start > MAX_DURATION:
            raise DurationError("The time slot cannot be longer than 24 hours.")

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_min(self) -> int:
        """Slot duration in whole minutes."""
        return int(self.duration.total_seconds() // 60)

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def equals(self, other: "TimeSlot") -> bool:
        """Same start and same end, compared exactly."""
        return self.start == other.start and self.end == other.end

    def not_equals(self, other: "TimeSlot") -> bool:
        return self.start != other.start or self.end != other.end

    # -------------------------------------------------------------------------
    # Ordering (by start only)
    # -------------------------------------------------------------------------

    def less_than(self, other: "TimeSlot") -> bool:
        return self.start < other.start

    def greater_than(self, other: "TimeSlot") -> bool:
        return self.start > other.start

    def less_than_or_equal(self, other: "TimeSlot") -> bool:
        return self.start <= other.start

    def greater_than_or_equal(self, other: "TimeSlot") -> bool:
        return self.start >= other.start

    # -------------------------------------------------------------------------
    # Membership
    # -------------------------------------------------------------------------

    def contains(self, instant: datetime) -> bool:
        """True if instant falls in [start, end)."""
        return self.start <= instant < self.end

    def overlaps(self, other: "TimeSlot") -> bool:
        """True if the two half-open intervals share any instant."""
        return self.start < other.end and self.end > other.start

    def to_dict(self) -> dict:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "duration_min": self.duration_min,
        }

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end.isoformat()})"

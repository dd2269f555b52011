"""
Schedule - Ordered, non-overlapping time slots for one machine.

Enforces invariants:
- Slots are sorted ascending by start
- No two slots overlap
- Slots that have already fully elapsed are never admitted
- Every stored slot is naive or aware exactly as the clock is

Every operation samples "now" from the schedule's clock exactly once and
holds the schedule lock for its whole duration. A slot whose awareness does
not match the clock's raises InvalidTimeError instead of a TypeError from
deep inside a comparison.
"""

import logging
import threading
from collections.abc import Iterator
from datetime import datetime

from .clock import Clock, SystemClock
from .errors import InvalidTimeError, TimeSlotError
from .time_slot import TimeSlot, is_aware

logger = logging.getLogger(__name__)

# Rejection reasons reported by Schedule.book()
ELAPSED = "elapsed"
OVERLAP = "overlap"


class Schedule:
    """
    The bookings of a single machine.

    Responsibilities:
    - Admit new slots (rejecting stale or overlapping ones)
    - Remove slots by value
    - Answer busy/free queries relative to now
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or SystemClock()
        self._time_slots: list[TimeSlot] = []
        self._lock = threading.Lock()

    @property
    def time_slots(self) -> tuple[TimeSlot, ...]:
        """Snapshot of the slots in schedule order."""
        with self._lock:
            return tuple(self._time_slots)

    def __len__(self) -> int:
        with self._lock:
            return len(self._time_slots)

    def __iter__(self) -> Iterator[TimeSlot]:
        return iter(self.time_slots)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_time_slot(self, time_slot: TimeSlot) -> bool:
        """
        Admit a slot into the schedule.

        Returns False without touching the schedule if the slot ended before
        now or overlaps an existing slot. Otherwise inserts it before the
        first slot that starts later and returns True.

        Raises:
            InvalidTimeError: the slot is naive and the clock aware, or the reverse
        """
        admitted, _, _ = self.book(time_slot)
        return admitted

    def book(self, time_slot: TimeSlot) -> tuple[bool, str | None, list[TimeSlot]]:
        """
        Admit a slot, reporting why it was refused.

        The decision, the reason and the conflicts all come from one clock
        sample under one lock acquisition.

        Returns:
            (admitted, reason, conflicts): reason is None, ELAPSED or OVERLAP;
            conflicts are the overlapping slots in schedule order.

        Raises:
            InvalidTimeError: the slot is naive and the clock aware, or the reverse
        """
        with self._lock:
            now = self.clock.now()
            self._check_awareness(time_slot, now)

            if time_slot.end < now:
                logger.debug("Rejected %s: already elapsed at %s", time_slot, now.isoformat())
                return False, ELAPSED, []

            conflicts = [slot for slot in self._time_slots if slot.overlaps(time_slot)]
            if conflicts:
                logger.debug("Rejected %s: overlaps %s", time_slot, conflicts[0])
                return False, OVERLAP, conflicts

            for i, slot in enumerate(self._time_slots):
                if time_slot.less_than(slot):
                    self._time_slots.insert(i, time_slot)
                    return True, None, []

            self._time_slots.append(time_slot)
            return True, None, []

    def remove_time_slot(self, time_slot: TimeSlot) -> bool:
        """Remove the first slot with the same start and end. False if there is none."""
        with self._lock:
            for i, slot in enumerate(self._time_slots):
                if slot.equals(time_slot):
                    del self._time_slots[i]
                    return True
            return False

    def prune_elapsed(self) -> int:
        """Drop slots that ended at or before now. Returns the number dropped."""
        with self._lock:
            now = self.clock.now()
            kept = [slot for slot in self._time_slots if slot.end > now]
            dropped = len(self._time_slots) - len(kept)
            self._time_slots = kept

        if dropped:
            logger.debug("Pruned %d elapsed slots", dropped)
        return dropped

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_free(self, time_slot: TimeSlot) -> bool:
        """True if the slot overlaps nothing in the schedule. No past-time check."""
        with self._lock:
            self._check_awareness(time_slot, self.clock.now())
            return not any(slot.overlaps(time_slot) for slot in self._time_slots)

    def conflicts(self, time_slot: TimeSlot) -> list[TimeSlot]:
        """Existing slots that time_slot overlaps, in schedule order."""
        with self._lock:
            self._check_awareness(time_slot, self.clock.now())
            return [slot for slot in self._time_slots if slot.overlaps(time_slot)]

    def next_busy_time_slot(self) -> TimeSlot | None:
        """First slot starting strictly after now, or None."""
        with self._lock:
            now = self.clock.now()
            for slot in self._time_slots:
                if slot.start > now:
                    return slot
            return None

    def next_free_time_slot(self) -> TimeSlot | None:
        """
        Gap before the first slot that starts strictly after now.

        The gap runs from the end of the preceding slot (or from now, if the
        upcoming slot is the first one) to the upcoming slot's start.

        Returns None when no slot starts after now. That includes a schedule
        whose only remaining slot is in progress: the machine frees up when
        it ends, but there is no upcoming slot to bound the gap.

        Raises:
            OrderingError: the upcoming slot starts exactly when the previous one ends
            DurationError: the gap is longer than 24 hours
        """
        with self._lock:
            now = self.clock.now()
            for i, slot in enumerate(self._time_slots):
                if slot.start > now:
                    gap_start = self._time_slots[i - 1].end if i > 0 else now
                    try:
                        return TimeSlot(gap_start, slot.start)
                    except TimeSlotError as e:
                        logger.warning(
                            "Free gap %s -> %s is not a valid time slot: %s",
                            gap_start.isoformat(),
                            slot.start.isoformat(),
                            e,
                        )
                        raise
            return None

    def is_busy(self) -> bool:
        """True if some slot contains now."""
        with self._lock:
            now = self.clock.now()
            for slot in self._time_slots:
                if slot.start > now:
                    break
                if slot.contains(now):
                    return True
            return False

    @staticmethod
    def _check_awareness(time_slot: TimeSlot, now: datetime) -> None:
        if is_aware(time_slot.start) != is_aware(now):
            kind = "timezone-aware" if is_aware(time_slot.start) else "naive"
            raise InvalidTimeError(f"Slot {time_slot} is {kind} but the schedule clock is not.")

    def __repr__(self) -> str:
        return f"Schedule({len(self)} slots)"

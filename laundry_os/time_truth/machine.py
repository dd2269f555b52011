"""
Machine - A washer or dryer with its own schedule.

A machine is busy while the current time falls inside one of its slots and
idle otherwise. Slot calls are forwarded to the machine's schedule unchanged.
"""

import logging
from enum import StrEnum

from .clock import Clock
from .schedule import Schedule
from .time_slot import TimeSlot

logger = logging.getLogger(__name__)


class MachineStatus(StrEnum):
    """Coarse machine status."""

    BUSY = "busy"
    IDLE = "idle"


class Machine:
    def __init__(self, id: int, name: str, clock: Clock | None = None):
        self._id = id
        self._name = name
        self._schedule = Schedule(clock)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    def add_time_slot(self, time_slot: TimeSlot) -> bool:
        """Book a slot. False if it has elapsed or overlaps an existing booking."""
        admitted, _, _ = self.book(time_slot)
        return admitted

    def book(self, time_slot: TimeSlot) -> tuple[bool, str | None, list[TimeSlot]]:
        """Book a slot, returning (admitted, reason, conflicts) as Schedule.book does."""
        admitted, reason, conflicts = self._schedule.book(time_slot)
        if admitted:
            logger.info("Machine %s booked %s", self._id, time_slot, extra={"machine_id": self._id})
        else:
            logger.info(
                "Machine %s rejected %s (%s)", self._id, time_slot, reason, extra={"machine_id": self._id}
            )
        return admitted, reason, conflicts

    def remove_time_slot(self, time_slot: TimeSlot) -> bool:
        """Cancel a booking. False if no booking has the same start and end."""
        removed = self._schedule.remove_time_slot(time_slot)
        if removed:
            logger.info("Machine %s released %s", self._id, time_slot, extra={"machine_id": self._id})
        return removed

    def get_status(self) -> MachineStatus:
        return MachineStatus.BUSY if self._schedule.is_busy() else MachineStatus.IDLE

    def get_schedule(self) -> Schedule:
        return self._schedule

    def get_id(self) -> int:
        return self._id

    def get_name(self) -> str:
        return self._name

    def to_dict(self) -> dict:
        return {"id": self._id, "name": self._name, "status": str(self.get_status())}

    def __repr__(self) -> str:
        return f"Machine(id={self._id!r}, name={self._name!r})"

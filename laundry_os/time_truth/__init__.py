"""
Time Truth Module

The scheduling core of Laundry OS. Everything else depends on this.

Objects:
- TimeSlot (immutable half-open interval, at most 24 hours)
- Schedule (ordered bookings of one machine)
- Machine (washer/dryer owning one schedule)
- MachineRegistry (the laundry room roster)

Invariants:
- Slots in a schedule are sorted by start and never overlap
- Fully elapsed slots are never admitted
- Machine ids are unique within a registry
"""

from .clock import Clock, FixedClock, SystemClock
from .errors import (
    ConfigError,
    DuplicateMachineError,
    DurationError,
    InvalidTimeError,
    OrderingError,
    RegistryError,
    TimeSlotError,
    UnknownMachineError,
)
from .machine import Machine, MachineStatus
from .registry import MachineRegistry
from .schedule import ELAPSED, OVERLAP, Schedule
from .time_slot import MAX_DURATION, TimeSlot

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "TimeSlot",
    "MAX_DURATION",
    "Schedule",
    "ELAPSED",
    "OVERLAP",
    "Machine",
    "MachineStatus",
    "MachineRegistry",
    "TimeSlotError",
    "InvalidTimeError",
    "OrderingError",
    "DurationError",
    "RegistryError",
    "DuplicateMachineError",
    "UnknownMachineError",
    "ConfigError",
]

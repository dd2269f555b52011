# LAUNDRY OS - Core Library
"""
Reservation tracking for a shared laundry room.

Exports the scheduling core for the API, the CLI and other consumers.
"""

from .time_truth import (
    DurationError,
    FixedClock,
    InvalidTimeError,
    Machine,
    MachineRegistry,
    MachineStatus,
    OrderingError,
    Schedule,
    SystemClock,
    TimeSlot,
    TimeSlotError,
)

__version__ = "1.0.0"

__all__ = [
    "TimeSlot",
    "Schedule",
    "Machine",
    "MachineStatus",
    "MachineRegistry",
    "SystemClock",
    "FixedClock",
    "TimeSlotError",
    "InvalidTimeError",
    "OrderingError",
    "DurationError",
]

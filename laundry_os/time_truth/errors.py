"""
Errors raised by the Time Truth layer.

TimeSlot construction failures are ValueErrors: the caller supplied a bad
interval and must retry with corrected inputs. Admission rejections are not
errors at all; Schedule reports them through its boolean results.
"""


class TimeSlotError(ValueError):
    """Base class for time slot construction failures."""

    pass


class InvalidTimeError(TimeSlotError):
    """Raised when a supplied instant is not a well-formed point in time."""

    pass


class OrderingError(TimeSlotError):
    """Raised when a slot's start is not strictly before its end."""

    pass


class DurationError(TimeSlotError):
    """Raised when a slot is longer than the 24 hour maximum."""

    pass


class RegistryError(Exception):
    """Base class for machine roster failures."""

    pass


class DuplicateMachineError(RegistryError):
    """Raised when a machine id is already taken in the registry."""

    pass


class UnknownMachineError(RegistryError, KeyError):
    """Raised when no machine is registered under an id."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class ConfigError(RegistryError):
    """Raised when the machine roster config is malformed."""

    pass

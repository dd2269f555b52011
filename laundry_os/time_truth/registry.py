"""
Machine Registry - The laundry room roster.

Holds every machine by id and hands all of them the same clock.
Enforces invariants:
- Machine ids are unique within a registry
- Every machine in a roster file has an integer id and a name
"""

import logging
import threading
from collections.abc import Iterator
from pathlib import Path

import yaml

from laundry_os import paths

from .clock import Clock, SystemClock
from .errors import ConfigError, DuplicateMachineError, UnknownMachineError
from .machine import Machine

logger = logging.getLogger(__name__)


class MachineRegistry:
    """
    Roster of machines keyed by id.

    Usage:
        registry = MachineRegistry.from_config()
        washer = registry.get(1)
        washer.add_time_slot(TimeSlot(start, end))
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or SystemClock()
        self._machines: dict[int, Machine] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config_path: Path | str | None = None, clock: Clock | None = None) -> "MachineRegistry":
        """
        Build a registry from a YAML roster:

            machines:
              - id: 1
                name: Washer 1

        A missing file yields an empty registry.

        Raises:
            ConfigError: the file is not valid YAML or an entry is malformed
            DuplicateMachineError: two entries share an id
        """
        if config_path is None:
            config_path = paths.machines_config_path()
        config_path = Path(config_path)

        registry = cls(clock)
        for entry in cls._load_config(config_path):
            machine_id, name = cls._parse_entry(entry, config_path)
            registry.add_machine(machine_id, name)

        logger.info("Loaded %d machines from %s", len(registry), config_path)
        return registry

    @staticmethod
    def _load_config(config_path: Path) -> list:
        if not config_path.exists():
            logger.warning("Machine roster not found at %s, starting with no machines", config_path)
            return []
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{config_path}: expected a mapping with a 'machines' list")
        machines = data.get("machines") or []
        if not isinstance(machines, list):
            raise ConfigError(f"{config_path}: 'machines' must be a list")
        return machines

    @staticmethod
    def _parse_entry(entry, config_path: Path) -> tuple[int, str]:
        if not isinstance(entry, dict) or "id" not in entry or "name" not in entry:
            raise ConfigError(f"{config_path}: each machine needs an id and a name, got {entry!r}")
        machine_id = entry["id"]
        # bool is an int subclass; reject it explicitly
        if isinstance(machine_id, bool) or not isinstance(machine_id, int):
            raise ConfigError(f"{config_path}: machine id must be an integer, got {machine_id!r}")
        return machine_id, str(entry["name"])

    def add_machine(self, machine_id: int, name: str) -> Machine:
        """Create and register a machine. Raises DuplicateMachineError if the id is taken."""
        with self._lock:
            if machine_id in self._machines:
                raise DuplicateMachineError(f"Machine id {machine_id} is already registered")
            machine = Machine(machine_id, name, clock=self.clock)
            self._machines[machine_id] = machine
        logger.debug("Registered machine %s (%s)", machine_id, name)
        return machine

    def remove_machine(self, machine_id: int) -> bool:
        with self._lock:
            return self._machines.pop(machine_id, None) is not None

    def get(self, machine_id: int) -> Machine:
        """Look up a machine. Raises UnknownMachineError if absent."""
        with self._lock:
            machine = self._machines.get(machine_id)
        if machine is None:
            raise UnknownMachineError(f"Machine {machine_id} not found")
        return machine

    def machines(self) -> list[Machine]:
        """All machines, ascending by id."""
        with self._lock:
            return [self._machines[machine_id] for machine_id in sorted(self._machines)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._machines)

    def __iter__(self) -> Iterator[Machine]:
        return iter(self.machines())

    def __contains__(self, machine_id: object) -> bool:
        with self._lock:
            return machine_id in self._machines

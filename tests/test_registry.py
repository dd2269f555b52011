"""
Tests for MachineRegistry — roster uniqueness and YAML loading.
"""

import pytest

from laundry_os.time_truth import (
    ConfigError,
    DuplicateMachineError,
    MachineRegistry,
    UnknownMachineError,
)
from tests.fixtures import slot


@pytest.fixture
def registry(clock):
    return MachineRegistry(clock)


class TestRoster:
    def test_add_and_get(self, registry):
        washer = registry.add_machine(1, "Washer 1")
        assert registry.get(1) is washer
        assert 1 in registry
        assert len(registry) == 1

    def test_duplicate_id_rejected(self, registry):
        registry.add_machine(1, "Washer 1")
        with pytest.raises(DuplicateMachineError):
            registry.add_machine(1, "Dryer 1")
        assert registry.get(1).get_name() == "Washer 1"

    def test_unknown_machine(self, registry):
        with pytest.raises(UnknownMachineError) as exc_info:
            registry.get(99)
        assert str(exc_info.value) == "Machine 99 not found"

    def test_unknown_machine_is_a_key_error(self, registry):
        with pytest.raises(KeyError):
            registry.get(99)

    def test_remove(self, registry):
        registry.add_machine(1, "Washer 1")
        assert registry.remove_machine(1) is True
        assert registry.remove_machine(1) is False
        assert 1 not in registry

    def test_machines_sorted_by_id(self, registry):
        for machine_id in (3, 1, 2):
            registry.add_machine(machine_id, f"Machine {machine_id}")
        assert [m.get_id() for m in registry.machines()] == [1, 2, 3]
        assert [m.get_id() for m in registry] == [1, 2, 3]

    def test_machines_share_the_registry_clock(self, registry, clock):
        washer = registry.add_machine(1, "Washer 1")
        assert washer.get_schedule().clock is clock
        washer.add_time_slot(slot(-5, 5))
        assert registry.get(1).get_status() == "busy"


class TestFromConfig:
    def test_loads_roster(self, roster_file, clock):
        registry = MachineRegistry.from_config(roster_file, clock=clock)
        assert [(m.get_id(), m.get_name()) for m in registry] == [
            (1, "Washer 1"),
            (2, "Washer 2"),
            (7, "Dryer 1"),
        ]
        assert registry.get(7).get_schedule().clock is clock

    def test_missing_file_gives_empty_registry(self, tmp_path, caplog):
        registry = MachineRegistry.from_config(tmp_path / "nope.yaml")
        assert len(registry) == 0
        assert "not found" in caplog.text

    def test_empty_file(self, tmp_path):
        path = tmp_path / "machines.yaml"
        path.write_text("")
        assert len(MachineRegistry.from_config(path)) == 0

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "machines.yaml"
        path.write_text("machines: [id: 1, name: 'unterminated\n")
        with pytest.raises(ConfigError):
            MachineRegistry.from_config(path)

    def test_machines_must_be_a_list(self, tmp_path):
        path = tmp_path / "machines.yaml"
        path.write_text("machines:\n  washer: 1\n")
        with pytest.raises(ConfigError):
            MachineRegistry.from_config(path)

    def test_entry_needs_a_name(self, tmp_path):
        path = tmp_path / "machines.yaml"
        path.write_text("machines:\n  - id: 1\n")
        with pytest.raises(ConfigError):
            MachineRegistry.from_config(path)

    @pytest.mark.parametrize("bad_id", ["'one'", "true", "1.5"])
    def test_id_must_be_an_integer(self, tmp_path, bad_id):
        path = tmp_path / "machines.yaml"
        path.write_text(f"machines:\n  - id: {bad_id}\n    name: Washer\n")
        with pytest.raises(ConfigError):
            MachineRegistry.from_config(path)

    def test_duplicate_ids_in_file(self, tmp_path):
        path = tmp_path / "machines.yaml"
        path.write_text("machines:\n  - id: 1\n    name: A\n  - id: 1\n    name: B\n")
        with pytest.raises(DuplicateMachineError):
            MachineRegistry.from_config(path)

    def test_env_override(self, roster_file, monkeypatch):
        monkeypatch.setattr("laundry_os.config.MACHINES_CONFIG", str(roster_file))
        assert len(MachineRegistry.from_config()) == 3

    def test_app_home_roster_preferred_over_bundled(self, isolated_app_home):
        config_dir = isolated_app_home / "config"
        config_dir.mkdir(parents=True)
        (config_dir / "machines.yaml").write_text("machines:\n  - id: 5\n    name: Home Washer\n")
        registry = MachineRegistry.from_config()
        assert [m.get_name() for m in registry] == ["Home Washer"]

    def test_bundled_roster_is_the_fallback(self):
        registry = MachineRegistry.from_config()
        assert len(registry) == 4
        assert registry.get(1).get_name() == "Washer 1"

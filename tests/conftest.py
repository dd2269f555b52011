"""
Test configuration — ensures repo root is in sys.path + determinism guards.

Schedules under test run on a FixedClock pinned to NOW, never the wall clock.
The app home is redirected to a temp dir so no test reads a real roster.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import laundry_os without installation
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from laundry_os.time_truth import FixedClock, Machine, Schedule  # noqa: E402
from tests.fixtures import NOW  # noqa: E402


# =============================================================================
# DETERMINISM GUARD: isolate the app home
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_app_home(tmp_path, monkeypatch):
    """Point LAUNDRY_OS_HOME at a temp dir and clear roster overrides."""
    home = tmp_path / "laundry_home"
    monkeypatch.setenv("LAUNDRY_OS_HOME", str(home))
    monkeypatch.delenv("LAUNDRY_OS_MACHINES", raising=False)
    monkeypatch.setattr("laundry_os.config.MACHINES_CONFIG", None)
    return home


# =============================================================================
# SCHEDULING FIXTURES
# =============================================================================


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def schedule(clock):
    return Schedule(clock)


@pytest.fixture
def machine(clock):
    return Machine(1, "Washer 1", clock=clock)


@pytest.fixture
def roster_file(tmp_path):
    """A machines.yaml with two washers and a dryer."""
    path = tmp_path / "machines.yaml"
    path.write_text(
        "machines:\n"
        "  - id: 1\n"
        "    name: Washer 1\n"
        "  - id: 2\n"
        "    name: Washer 2\n"
        "  - id: 7\n"
        "    name: Dryer 1\n"
    )
    return path

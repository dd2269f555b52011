from __future__ import annotations

import os
from pathlib import Path

from . import config

APP_ENV_HOME = "LAUNDRY_OS_HOME"


def project_root() -> Path:
    """
    Repository/project root directory.
    Contains laundry_os/, config/, tests/.
    """
    return Path(__file__).parent.parent.resolve()


def app_home() -> Path:
    """
    User-writable home for Laundry OS.
    Override with LAUNDRY_OS_HOME.
    """
    if os.environ.get(APP_ENV_HOME):
        return Path(os.environ[APP_ENV_HOME]).expanduser().resolve()
    return (Path.home() / ".laundry_os").resolve()


def config_dir() -> Path:
    return app_home() / "config"


def machines_config_path() -> Path:
    """
    Machine roster path.

    Resolution order:
    1. LAUNDRY_OS_MACHINES env var (explicit override)
    2. ~/.laundry_os/config/machines.yaml
    3. <project root>/config/machines.yaml (the bundled sample roster)
    """
    if config.MACHINES_CONFIG:
        return Path(config.MACHINES_CONFIG).expanduser().resolve()
    user_config = config_dir() / "machines.yaml"
    if user_config.exists():
        return user_config
    return project_root() / "config" / "machines.yaml"

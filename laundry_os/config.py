"""
Centralized configuration for LAUNDRY OS.

All values that vary by deployment belong here.
Override via environment variables where marked.
"""

import os

# ============================================================
# Logging
# ============================================================

LOG_LEVEL: str = os.environ.get("LAUNDRY_OS_LOG_LEVEL", "INFO")
"""Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."""

_log_json = os.environ.get("LAUNDRY_OS_LOG_JSON", "").strip().lower()
LOG_JSON: bool | None = None if not _log_json else _log_json in ("1", "true", "yes")
"""Force JSON (true) or human (false) log output. Unset: JSON when stderr is not a TTY."""

# ============================================================
# Machine roster
# ============================================================

MACHINES_CONFIG: str | None = os.environ.get("LAUNDRY_OS_MACHINES")
"""Path to the machines.yaml roster. Unset: <app home>/config/machines.yaml."""

# ============================================================
# API server
# ============================================================

HOST: str = os.environ.get("LAUNDRY_OS_HOST", "0.0.0.0")  # noqa: S104
"""Interface the API server binds to."""

PORT: int = int(os.environ.get("PORT", "3000"))
"""API server port."""

CORS_ORIGINS: list[str] = [
    origin.strip() for origin in os.environ.get("CORS_ORIGINS", "*").split(",") if origin.strip()
]
"""Allowed CORS origins, comma-separated. Dev default allows all."""

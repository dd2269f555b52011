"""REST API over the machine registry."""

from .server import create_app, run

__all__ = ["create_app", "run"]

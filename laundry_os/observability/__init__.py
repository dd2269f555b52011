"""
Observability module: structured logging and request IDs.

Usage:
    from laundry_os.observability import configure_logging, RequestContext

    configure_logging("INFO")

    with RequestContext() as ctx:
        logger.info("Booking slot", extra={"machine_id": 1})
"""

from .context import RequestContext, generate_request_id, get_request_id
from .logging import CorrelationIdMiddleware, HumanFormatter, JSONFormatter, configure_logging

__all__ = [
    # Logging
    "configure_logging",
    "JSONFormatter",
    "HumanFormatter",
    "CorrelationIdMiddleware",
    # Context
    "RequestContext",
    "generate_request_id",
    "get_request_id",
]

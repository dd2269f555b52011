"""
LAUNDRY OS API Server - REST API for the laundry room.
"""

import logging
import socket
from datetime import UTC, datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from laundry_os import __version__, config
from laundry_os.observability import CorrelationIdMiddleware
from laundry_os.time_truth import MachineRegistry, SystemClock

from .machine_router import router as machine_router
from .response_models import HealthResponse

logger = logging.getLogger(__name__)


def create_app(registry: MachineRegistry | None = None) -> FastAPI:
    """
    Build the API app around a machine registry.

    Without a registry, the roster is loaded from config on a UTC clock;
    request timestamps are normalized to UTC to match.
    """
    if registry is None:
        registry = MachineRegistry.from_config(clock=SystemClock(UTC))

    app = FastAPI(
        title="LAUNDRY OS API",
        description="Laundry room machine reservations",
        version=__version__,
    )
    app.state.registry = registry

    # Dev default: allow all origins; Production: set CORS_ORIGINS to a comma-separated list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(machine_router, prefix="/api")

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/health", response_model=HealthResponse)
    def health():
        return {
            "status": "healthy",
            "version": __version__,
            "machines": len(app.state.registry),
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


def lan_address() -> str:
    """First non-loopback IPv4 address of this host, or 127.0.0.1."""
    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
    except OSError:
        return "127.0.0.1"
    for info in infos:
        address = info[4][0]
        if not address.startswith("127."):
            return address
    return "127.0.0.1"


def run(registry: MachineRegistry | None = None, host: str | None = None, port: int | None = None) -> None:
    """Run the server."""
    host = host or config.HOST
    port = port or config.PORT
    app = create_app(registry)
    logger.info("Server online listening at http://%s:%s", lan_address(), port)
    uvicorn.run(app, host=host, port=port, log_config=None)

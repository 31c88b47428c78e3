"""Entry point for the Simple Server API.

Serves the FastAPI application with Uvicorn on the fixed host and port
from ``Settings``.  Intended to be executed from the project root::

    python run.py

The startup confirmation is logged only once the listening socket is
bound.  If the port is already in use Uvicorn aborts startup and the
process exits with a non‑zero status.
"""
import asyncio
import logging

from uvicorn import Config, Server

from simple_server_api.app.core.config import settings
from simple_server_api.app.main import app

logger = logging.getLogger(__name__)


class ConfirmingServer(Server):
    """Uvicorn server that reports when it is accepting connections."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Server is now running on http://localhost:%s", self.config.port)


async def run_api(host: str = settings.host, port: int = settings.port) -> None:
    """Start the API using Uvicorn and serve until it stops."""
    config = Config(
        app=app,
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = ConfirmingServer(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()

"""Uvicorn launcher for the Grocery Store API.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``).  uvicorn is started
without its own logging config so its messages go through the
handlers installed by ``setup_logging``.
"""
import asyncio
import os

from uvicorn import Config, Server

from grocery_store_api.app.core.config import settings
from grocery_store_api.app.main import app


def build_config() -> Config:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    return Config(
        app=app,
        host=host,
        port=port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


async def serve() -> None:
    """Start the API and run until interrupted."""
    server = Server(build_config())
    await server.serve()


def main() -> None:
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass

"""Entry point for the Book Store API.

Launches the FastAPI application under Uvicorn.  Host, port and log
level come from ``HOST``, ``PORT`` and ``LOG_LEVEL`` (see
``book_store_api.app.core.config``); defaults are ``0.0.0.0``, ``3000``
and ``INFO``.  Other settings may be placed in the environment before
starting.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from book_store_api.app.core.config import settings
from book_store_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

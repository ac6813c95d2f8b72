"""Entry point for the marketplace API.

Serves ``marketplace_api.app.main:app`` with uvicorn.  Host, port and
log level come from the same environment variables as the rest of the
configuration (``HOST``, ``PORT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from marketplace_api.app.core.config import settings
from marketplace_api.app.main import app


async def main() -> None:
    """Run the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

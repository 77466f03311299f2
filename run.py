"""Entry point for the Ticket API.

Serves the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables through
``Settings``; the defaults are ``0.0.0.0`` and ``8080``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from ticket_api.app.core.config import settings
from ticket_api.app.main import app


async def main() -> None:
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server started on :%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

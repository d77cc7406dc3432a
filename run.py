"""Entry point for the Posts Board web server.

Starts the FastAPI application with Uvicorn.  Host and port come from
``HOST`` and ``PORT`` (defaults ``0.0.0.0`` and ``8080``); see
``posts_board/app/core/config.py`` for the other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from posts_board.app.core.config import settings
from posts_board.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("listening to port: %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

"""Entry point for the Animal GraphQL API.

Serves the FastAPI application with uvicorn.  Host, port and log
level come from ``Settings`` (``HOST``, ``PORT`` and ``LOG_LEVEL``
environment variables).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from animal_graphql_api.app.core.config import settings
from animal_graphql_api.app.main import app


async def main() -> None:
    """Start the API server using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

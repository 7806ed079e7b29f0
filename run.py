"""Entry point for serving the AppyDaveApp API.

Starts a single uvicorn server for the FastAPI application.  Host and
port come from the ``HOST`` and ``PORT`` settings (defaults ``0.0.0.0``
and ``3000``); they may be placed in a ``.env`` file in the working
directory.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from appydave_api.app.core.config import get_settings
from appydave_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    settings = get_settings()
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # Logging is owned by setup_logging; requests are logged by the
        # application middleware, not by uvicorn.
        log_config=None,
        access_log=False,
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

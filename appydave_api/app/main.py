"""
Main entrypoint for the AppyDaveApp API.

This module assembles the FastAPI application, sets up logging, wires
the shared database handle into the repository and includes the
versioned routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly::

    uvicorn appydave_api.app.main:app --port 3000
"""

import logging
import time
import uuid
from typing import Optional

from fastapi import FastAPI, Request, Response

from .api.v1.router import router as v1_router
from .core.config import Settings, get_settings
from .core.db import Database, init_db
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .services.service_repository import SQLiteServiceRepository, seed_default_services

access_logger = logging.getLogger("appydave_api.access")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the process-wide settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured application.  The database schema is migrated when
        the application starts, not when it is created.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    # Unknown paths must 404 rather than redirect to a slash variant.
    app = FastAPI(title=settings.project_name, version=settings.api_version, redirect_slashes=False)

    database = Database(settings.database_url, timeout=settings.database_timeout)
    app.state.settings = settings
    app.state.database = database
    app.state.service_repository = SQLiteServiceRepository(database)

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000.0
        response.headers["x-request-id"] = request_id
        response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
        access_logger.info(
            "%s %s -> %s (%.2f ms)", request.method, request.url.path, response.status_code, duration_ms
        )
        return response

    register_error_handlers(app)

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    def startup_event() -> None:
        version = init_db(database)
        logging.getLogger(__name__).info("Database %s at schema version %s", database.path, version)
        if settings.seed_on_startup:
            seed_default_services(app.state.service_repository)

    return app


app = create_app()

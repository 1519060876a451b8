"""
Main entrypoint for the Country Atlas API.

This module assembles the FastAPI application, sets up logging, error
handlers and request logging, and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn country_atlas_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.endpoints import debug
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import RequestLoggingMiddleware, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Creates the schema on first start; later starts only apply new
    # migrations (file databases) or find them applied (shared memory).
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    register_error_handlers(app)
    app.add_middleware(RequestLoggingMiddleware, path_prefix=settings.api_prefix)

    app.include_router(v1_router, prefix=settings.api_prefix)
    if settings.enable_debug_routes:
        app.include_router(debug.router, prefix=f"{settings.api_prefix}/debug", tags=["debug"])

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

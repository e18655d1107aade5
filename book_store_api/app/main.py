"""
Main entrypoint for the Book Store API.

This module assembles the FastAPI application: it sets up logging,
installs CORS, registers the exception handlers and includes the
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``.  Run it
with uvicorn or another ASGI server, e.g.::

    uvicorn book_store_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.exception_handlers import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import get_store

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.  Tests
        pass their own instance to switch options such as
        ``strict_status_codes``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        redirect_slashes=False,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(health.router, tags=["health"])

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "%s %s started with %d books in memory (strict status codes: %s)",
            app_settings.project_name,
            app_settings.api_version,
            len(get_store()),
            app_settings.strict_status_codes,
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

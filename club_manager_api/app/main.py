"""
Main entrypoint for the Club Manager API.

This module assembles the FastAPI application, sets up logging,
installs the error handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn club_manager_api.app.main:app --reload
"""

from typing import Any, Dict

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import init_db
from .api.errors import install_error_handlers
from .api.v1.router import router as v1_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the modules below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    install_error_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.get("/health", tags=["health"])
    async def health() -> Dict[str, Any]:
        return {"status": "ok", "name": settings.project_name, "version": settings.api_version}

    @app.on_event("startup")
    async def startup_event() -> None:
        # Seed the database file with the default accounts on first run.
        init_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

"""
Main entrypoint for the Invoice Dashboard.

This module assembles the FastAPI application, sets up logging and
includes the dashboard routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn invoice_dashboard.app.main:app --reload
"""

from fastapi import FastAPI

from .api.router import router as dashboard_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, includes the routers and registers a startup
    hook that applies pending database migrations.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(dashboard_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first start and brings the schema
        # up to date.
        init_db()

    return app


app = create_app()

"""
Main entrypoint for the Gift List API.

This module assembles the FastAPI application, sets up logging, opens
the storage registry and includes the routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn gift_list_api.app.main:app --reload

Routes are served both at the root (``/gifts``, ``/search/{query}``)
and under ``/api/v1``.
"""

from typing import Dict, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.storage import StorageRegistry


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment
        at import time.  Tests pass a ``Settings`` pointing at a
        temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.registry = StorageRegistry(settings.database_url)

    app.include_router(v1_router)
    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/health", tags=["health"])
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        app.state.registry.open()

    return app


app = create_app()

"""
Main entrypoint for the Hotel Reviews API.

This module assembles the FastAPI application, sets up logging, builds
the repository and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn hotel_reviews_api.app.main:app --reload

Tests call ``create_app`` directly with their own settings or
repository so every test gets an isolated store.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import get_database_path
from .core.logging_config import setup_logging
from .services.repository import Repository
from .storage import EntityStore, MemoryEntityStore, SQLiteEntityStore


def build_store(app_settings: Settings) -> EntityStore:
    """Instantiate the entity store selected by ``storage_backend``."""
    backend = app_settings.storage_backend.lower()
    if backend == "memory":
        return MemoryEntityStore()
    if backend == "sqlite":
        return SQLiteEntityStore(get_database_path(app_settings.database_url))
    raise ValueError(f"Unknown storage backend: {app_settings.storage_backend}")


def create_app(
    app_settings: Optional[Settings] = None,
    repository: Optional[Repository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.
    repository : Optional[Repository]
        A ready repository.  If omitted, one is built over the store
        selected by ``app_settings.storage_backend``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the store setup
    # below can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    if repository is None:
        repository = Repository(
            build_store(app_settings),
            destination_image_url=app_settings.destination_image_url,
        )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.repository = repository

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

"""
Main entrypoint for the Local Services Marketplace API.

This module assembles the FastAPI application: it sets up logging,
creates (or accepts) the entity store, seeds it with sample data and
includes the versioned routers.  The store is attached to
``app.state.storage`` and reaches handlers through the
``get_storage`` dependency, so every app instance owns exactly one
store.  Run with uvicorn::

    uvicorn marketplace_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.seed import seed_sample_data
from .core.storage import EntityStore

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed payloads with a generic 400."""
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data"},
    )


def create_app(storage: Optional[EntityStore] = None, seed: Optional[bool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[EntityStore]
        Store to serve.  A fresh one is created when omitted.
    seed : Optional[bool]
        Whether to load the sample rows into a freshly created store.
        Defaults to ``settings.seed_sample_data``; ignored when a
        store is passed in.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    if storage is None:
        storage = EntityStore()
        if settings.seed_sample_data if seed is None else seed:
            seed_sample_data(storage)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.storage = storage
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(v1_router, prefix="/api")

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

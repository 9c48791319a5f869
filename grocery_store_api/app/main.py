"""
Main entrypoint for the Grocery Store API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn grocery_store_api.app.main:app --reload
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import close_storage, init_storage
from .api.v1.router import router as v1_router
from .api.v1.endpoints import customers


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that startup messages are formatted.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.add_exception_handler(RequestValidationError, customers.invalid_body_handler)

    app.include_router(v1_router, prefix="/api/v1")
    # Older clients address customers under the original controller
    # route.  Both prefixes expose identical endpoints.
    app.include_router(customers.router, prefix="/api/values", tags=["customers"])

    @app.on_event("startup")
    async def startup_event() -> None:
        init_storage()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_storage()

    return app


app = create_app()

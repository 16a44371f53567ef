"""
Sholist FastAPI Application
Main entry point: storage initialization, middleware, and route registration
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional

from api.routes import health, ingredients
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    storage_exception_handler,
    general_exception_handler,
)
from adapters.legacy_storage import LegacyStorage, build_legacy_storage
from app.config import settings
from app.exceptions import StorageError
from app.logging_config import configure_logging
from domain.models.database import Database, get_database
from migrations.initialization import initialize_and_migrate_database

configure_logging()
_logger = logging.getLogger("sholist.main")


def create_app(
    database: Optional[Database] = None,
    legacy_storage: Optional[LegacyStorage] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        database: handle to use instead of the process-wide one
        legacy_storage: legacy data source instead of the configured file
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _logger.info(f"Starting Sholist in {settings.environment.value} mode")

        db = database if database is not None else get_database()
        storage = (
            legacy_storage
            if legacy_storage is not None
            else build_legacy_storage(settings.legacy_storage_path)
        )

        result = await initialize_and_migrate_database(db, storage)
        if not result.is_success:
            # The schema is in an unknown state; refuse to serve.
            _logger.error("Database initialization failed: %s", result.get_error())
            result.get_value()

        _logger.info("Database initialization succeeded")
        app.state.database = db
        try:
            yield
        finally:
            _logger.info("Shutting down Sholist")

    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
    )

    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(ingredients.router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )

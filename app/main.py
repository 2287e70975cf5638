"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized error-to-HTTP mapping)
- Origin restriction and request logging middleware
- Logging configuration
- Database engine and startup connectivity check

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from alembic.util import CommandError
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings, settings
from app.core.database import build_engine, describe_engine, verify_connection
from app.infrastructure.catalog.migrations import apply_migrations
from app.interfaces.catalog.router import router as catalog_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import RequestLoggingMiddleware, configure_logging
from app.shared.security.cors import OriginRestrictionMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: verify the store, optionally migrate, release the pool.

    A store that cannot be reached is logged and the application keeps
    serving requests.
    """
    engine: Engine = app.state.engine

    if verify_connection(engine):
        logger.info("Database connection established: %s", describe_engine(engine))
        if app.state.settings.migrate_on_startup:
            try:
                apply_migrations(engine)
            except (SQLAlchemyError, CommandError):
                logger.error("Schema migration failed during startup", exc_info=True)

    yield

    if app.state.owns_engine:
        engine.dispose()


def create_app(
    app_settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use; defaults to the environment-loaded ones.
        engine: Engine to use; built from the settings when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        debug=app_settings.debug,
        docs_url=app_settings.docs_url,
        openapi_url=app_settings.openapi_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    # --- Store ---
    app.state.settings = app_settings
    app.state.owns_engine = engine is None
    if engine is None:
        engine = build_engine(
            app_settings.get_database_url(), ssl_required=app_settings.database_ssl
        )
    app.state.engine = engine

    # --- Middleware (last added runs first) ---
    if app_settings.frontend_url:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[app_settings.frontend_url],
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(
        OriginRestrictionMiddleware,
        allowed_origin=app_settings.frontend_url,
        exempt_paths=[
            app_settings.docs_url,
            app_settings.openapi_url,
            f"{app_settings.api_prefix}/health",
        ],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=app_settings.api_prefix)
    app.include_router(catalog_router, prefix=app_settings.api_prefix)

    return app


app = create_app()

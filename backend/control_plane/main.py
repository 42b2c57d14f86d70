"""Control Plane API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ControlPlaneError -> structured JSON responses
    - Missing CONTROL_DB_URL or an unreachable control database aborts startup;
      neither degrades into per-request errors
    - The DatabaseSessionManager is created in lifespan and stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: startup failure propagates and stops uvicorn
    - create_app() reads no settings: importing the module has no side effects
      beyond building the app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from control_plane.api.error_handlers import register_error_handlers
from control_plane.api.middleware import cors_middleware, request_logging_middleware
from control_plane.api.routes import city_theme, health
from control_plane.config import get_settings
from control_plane.infrastructure.database import DatabaseSessionManager
from control_plane.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    db_manager = DatabaseSessionManager(
        settings.control_db_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.theme_lookup_timeout_seconds,
    )
    try:
        await db_manager.ping()
    except Exception:
        logger.critical("Cannot connect to control database", exc_info=True)
        await db_manager.dispose()
        raise

    app.state.db_manager = db_manager
    logger.info("Control Plane API started")
    try:
        yield
    finally:
        logger.info("Control Plane API shutting down")
        await db_manager.dispose()
        app.state.db_manager = None


def create_app() -> FastAPI:
    app = FastAPI(
        title="Conecta Control Plane API", version="1.0.0", lifespan=lifespan,
    )

    # Last registered runs first: logging wraps CORS
    app.middleware("http")(cors_middleware)
    app.middleware("http")(request_logging_middleware)

    app.include_router(health.router)
    app.include_router(city_theme.router)

    register_error_handlers(app)
    return app


app = create_app()

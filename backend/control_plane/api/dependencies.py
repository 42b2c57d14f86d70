"""Route Dependencies: wire app-scoped resources into request handlers.

Invariants:
    - The DatabaseSessionManager lives on app.state, set by the lifespan
    - A ThemeLookupService is built per request around the injected repository
      (no cross-request state in the service)

Design Decisions:
    - Tests override get_db_manager or get_theme_service through
      app.dependency_overrides instead of patching globals
"""

from fastapi import Depends, Request

from control_plane.config import Settings, get_settings
from control_plane.infrastructure.city_repository import SqlCityRepository
from control_plane.infrastructure.database import DatabaseSessionManager
from control_plane.services.theme_lookup import ThemeLookupService


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """FastAPI dependency for the control database handle."""
    db = getattr(request.app.state, "db_manager", None)
    if db is None:
        raise RuntimeError("Database not initialized")
    return db


def get_theme_service(
    db: DatabaseSessionManager = Depends(get_db_manager),
    settings: Settings = Depends(get_settings),
) -> ThemeLookupService:
    return ThemeLookupService(
        SqlCityRepository(db),
        timeout_seconds=settings.theme_lookup_timeout_seconds,
    )

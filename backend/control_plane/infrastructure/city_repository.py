"""City Repository: read-only SQL access to the cities table.

Invariants:
    - Exactly one parameterized SELECT per call, exact case-sensitive slug match, LIMIT 1
    - Nullable columns coalesced to "" in SQL, so City fields are never None
    - is_active is fetched, never filtered on
    - Never raises for absence or store failure: returns a CityLookup variant

Design Decisions:
    - Column-level select with coalesce() over ORM entity load: the read boundary
      owns null normalization, the domain City stays None-free
    - No logging here: the service logs failures once, with the slug
"""

from sqlalchemy import func, select
from sqlalchemy.engine import Row

from control_plane.core.domain_types import City, CityId, CitySlug
from control_plane.core.errors import DatabaseError
from control_plane.core.lookup_results import (
    CityFound, CityLookup, CityMissing, LookupFailed,
)
from control_plane.infrastructure.database import DatabaseSessionManager
from control_plane.models.city import City as CityModel


def _city_by_slug_query(slug: str):
    return (
        select(
            CityModel.id,
            CityModel.name,
            CityModel.slug,
            func.coalesce(CityModel.logo_url, "").label("logo_url"),
            func.coalesce(CityModel.primary_color, "").label("primary_color"),
            func.coalesce(CityModel.secondary_color, "").label("secondary_color"),
            func.coalesce(CityModel.accent_color, "").label("accent_color"),
            func.coalesce(CityModel.db_url, "").label("db_url"),
            CityModel.is_active,
        )
        .where(CityModel.slug == slug)
        .limit(1)
    )


def _row_to_city(row: Row) -> City:
    """Build a City from a result row. Raises ValueError on malformed rows."""
    if row.id is None or not isinstance(row.name, str) or not isinstance(row.slug, str):
        raise ValueError("city row is missing id, name or slug")
    if not isinstance(row.is_active, bool):
        raise ValueError(f"city row has non-boolean is_active: {row.is_active!r}")
    return City(
        id=CityId(str(row.id)),
        name=row.name,
        slug=CitySlug(row.slug),
        logo_url=row.logo_url,
        primary_color=row.primary_color,
        secondary_color=row.secondary_color,
        accent_color=row.accent_color,
        db_url=row.db_url,
        is_active=row.is_active,
    )


class SqlCityRepository:
    """CityRepository backed by the control database."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def find_by_slug(self, slug: str) -> CityLookup:
        try:
            async with self._db.session() as session:
                result = await session.execute(_city_by_slug_query(slug))
                row = result.first()
            if row is None:
                return CityMissing(slug=slug)
            return CityFound(city=_row_to_city(row))
        except (DatabaseError, OSError) as e:
            return LookupFailed(slug=slug, cause=e)
        except (ValueError, TypeError) as e:
            # column result processors (e.g. Uuid) run inside first()
            return LookupFailed(slug=slug, cause=e)

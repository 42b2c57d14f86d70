"""Lookup Results: tagged outcomes for the store boundary and the theme service.

Invariants:
    - CityLookup is decided at the store boundary: found, missing, or failed
    - ThemeResult has exactly one variant per outcome the HTTP layer maps
      (200, 400, 404, 403, 500)
    - Failure variants carry the cause for server-side logs only

Design Decisions:
    - Frozen dataclasses + union aliases: callers use `match` on the variant
      instead of comparing error objects or status codes
"""

from dataclasses import dataclass

from control_plane.core.domain_types import City, CityTheme


# ─── Store Boundary ──────────────────────────────────────────────

@dataclass(frozen=True)
class CityFound:
    city: City


@dataclass(frozen=True)
class CityMissing:
    slug: str


@dataclass(frozen=True)
class LookupFailed:
    slug: str
    cause: BaseException


CityLookup = CityFound | CityMissing | LookupFailed


# ─── Theme Service Outcomes ──────────────────────────────────────

@dataclass(frozen=True)
class ThemeServed:
    """Active city found and projected."""
    theme: CityTheme


@dataclass(frozen=True)
class InvalidSlug:
    """Slug rejected before any store access."""
    reason: str


@dataclass(frozen=True)
class CityNotFound:
    slug: str


@dataclass(frozen=True)
class CityDisabled:
    """Row exists but the tenant is deactivated."""
    slug: str


@dataclass(frozen=True)
class ThemeLookupFailed:
    """Driver error, malformed row, or deadline elapsed."""
    slug: str
    cause: BaseException


ThemeResult = (
    ThemeServed | InvalidSlug | CityNotFound | CityDisabled | ThemeLookupFailed
)

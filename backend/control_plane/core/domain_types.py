"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - CityId wraps the control-store UUID rendered as text
    - CitySlug is matched case-sensitively and never normalized
    - City is immutable: the service reads rows, it never mutates them

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Styling fields are plain str, already coalesced to "" at the read boundary
"""

from dataclasses import dataclass
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CityId = NewType("CityId", str)
CitySlug = NewType("CitySlug", str)


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class City:
    """Control-store tenant record, one per city."""
    id: CityId
    name: str
    slug: CitySlug
    logo_url: str = ""
    primary_color: str = ""
    secondary_color: str = ""
    accent_color: str = ""
    # Per-tenant data-plane connection string. Carried, never exposed.
    db_url: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class CityTheme:
    """Public branding projection of a City."""
    name: str
    slug: str
    logo_url: str
    primary_color: str
    secondary_color: str
    accent_color: str

"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Store access goes through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - find_by_slug returns a CityLookup variant instead of raising, so absence
      and failure are decided at the store boundary
"""

from typing import Protocol

from control_plane.core.lookup_results import CityLookup


class CityRepository(Protocol):
    """Contract for read-only city access, implemented by shell."""
    async def find_by_slug(self, slug: str) -> CityLookup: ...

"""Slug Enforcement: validates the path slug before the store is touched.

Invariants:
    - Missing or empty slug -> InvalidSlug
    - Any other slug (whitespace included) is returned untouched: lookup is
      exact and case-sensitive, so it reaches the store and may yield 404
"""

from control_plane.core.lookup_results import InvalidSlug

SLUG_REQUIRED = "slug is required"


def validate_slug(slug: str | None) -> InvalidSlug | None:
    """Return InvalidSlug if the slug cannot be looked up, else None."""
    if not slug:
        return InvalidSlug(reason=SLUG_REQUIRED)
    return None

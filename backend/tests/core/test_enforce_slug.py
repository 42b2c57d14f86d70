"""Slug enforcement: empty slugs rejected, everything else passed through."""

import pytest

from control_plane.core.enforce_slug import SLUG_REQUIRED, validate_slug
from control_plane.core.lookup_results import InvalidSlug


@pytest.mark.parametrize("slug", ["", None])
def test_empty_slug_is_invalid(slug):
    assert validate_slug(slug) == InvalidSlug(reason=SLUG_REQUIRED)


@pytest.mark.parametrize(
    "slug", ["springfield", "Springfield", "sao-paulo", "nope", " ", "\t"],
)
def test_non_empty_slug_is_accepted(slug):
    assert validate_slug(slug) is None

"""Domain Types: verifies City defaults and immutability.

Tests:
    - NewType wrappers are transparent at runtime
    - Styling fields and db_url default to "" (never None)
    - City and CityTheme are frozen
"""

import dataclasses

import pytest

from control_plane.core.domain_types import City, CityId, CitySlug, CityTheme


def test_identity_types_wrap_str():
    assert CityId("abc") == "abc"
    assert CitySlug("springfield") == "springfield"


def test_city_optional_fields_default_to_empty_string():
    city = City(id=CityId("1"), name="Springfield", slug=CitySlug("springfield"))
    assert city.logo_url == ""
    assert city.primary_color == ""
    assert city.secondary_color == ""
    assert city.accent_color == ""
    assert city.db_url == ""
    assert city.is_active is True


def test_city_is_frozen():
    city = City(id=CityId("1"), name="Springfield", slug=CitySlug("springfield"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        city.is_active = False


def test_city_theme_has_no_private_fields():
    names = {f.name for f in dataclasses.fields(CityTheme)}
    assert names == {
        "name", "slug", "logo_url",
        "primary_color", "secondary_color", "accent_color",
    }

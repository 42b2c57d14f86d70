"""Tests for project_city_theme: pure City -> CityTheme mapping, no IO."""

from control_plane.core.domain_types import City, CityId, CitySlug
from control_plane.core.theme_projection import project_city_theme


def _city(**overrides) -> City:
    fields = dict(
        id=CityId("0b7c8c1e-0000-0000-0000-000000000001"),
        name="Springfield",
        slug=CitySlug("springfield"),
        logo_url="https://x/logo.png",
        primary_color="#112233",
        secondary_color="",
        accent_color="#ffcc00",
        db_url="postgresql://secret@neon/springfield",
        is_active=True,
    )
    fields.update(overrides)
    return City(**fields)


def test_projects_display_fields():
    theme = project_city_theme(_city())
    assert theme.name == "Springfield"
    assert theme.slug == "springfield"
    assert theme.logo_url == "https://x/logo.png"
    assert theme.primary_color == "#112233"
    assert theme.secondary_color == ""
    assert theme.accent_color == "#ffcc00"


def test_projection_drops_db_url_and_id():
    theme = project_city_theme(_city())
    assert not hasattr(theme, "db_url")
    assert not hasattr(theme, "id")
    assert not hasattr(theme, "is_active")


def test_projection_ignores_active_flag():
    # The gate lives in the service; projection is unconditional
    theme = project_city_theme(_city(is_active=False))
    assert theme.name == "Springfield"


def test_empty_styling_fields_stay_empty_strings():
    theme = project_city_theme(_city(
        logo_url="", primary_color="", secondary_color="", accent_color="",
    ))
    assert theme.logo_url == ""
    assert theme.primary_color == ""
    assert theme.accent_color == ""

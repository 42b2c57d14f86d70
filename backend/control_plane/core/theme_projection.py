"""Theme Projection: maps a stored City to its public CityTheme.

Invariants:
    - Only name, slug, logo and the three palette colors cross over
    - id, db_url and is_active never appear in the projection
    - Pure function: no IO, no error path
"""

from control_plane.core.domain_types import City, CityTheme


def project_city_theme(city: City) -> CityTheme:
    """Project the display fields of a City."""
    return CityTheme(
        name=city.name,
        slug=city.slug,
        logo_url=city.logo_url,
        primary_color=city.primary_color,
        secondary_color=city.secondary_color,
        accent_color=city.accent_color,
    )

"""Theme Schemas: public wire shape of a city's branding theme.

Invariants:
    - Exactly six string keys: name, slug, logoUrl, primaryColor, secondaryColor, accentColor
    - No key is ever null or omitted (empty string instead)
    - id, db_url and is_active have no field here

Design Decisions:
    - Built from core.CityTheme by field name (populate_by_name)
    - alias_generator=to_camel with populate_by_name: snake_case in Python, camelCase on the wire
"""

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from control_plane.core.domain_types import CityTheme


class CityThemeResponse(BaseModel):
    """Public branding theme for login screens and citizen apps."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True,
    )

    name: str
    slug: str
    logo_url: str = ""
    primary_color: str = ""
    secondary_color: str = ""
    accent_color: str = ""

    @classmethod
    def from_theme(cls, theme: CityTheme) -> "CityThemeResponse":
        return cls.model_validate(asdict(theme))

    def to_wire(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)

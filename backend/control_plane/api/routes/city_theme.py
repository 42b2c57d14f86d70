"""City Theme: GET /api/cities/{slug}/theme, the public branding lookup.

Invariants:
    - Route is thin: ThemeLookupService decides the outcome, this module maps it
    - Every ThemeResult variant maps to exactly one status: 200, 400, 404, 403, 500
    - Failure responses go through the ControlPlaneError handler (no theme
      fields, no internal detail)
    - The {slug} segment may be empty so /api/cities//theme reaches the
      handler and is rejected as 400, not routed to 404

Design Decisions:
    - Custom "segment" path convertor ([^/]*): Starlette's default str
      convertor requires at least one character
"""

from fastapi import APIRouter, Depends
from starlette.convertors import Convertor, register_url_convertor

from control_plane.api.dependencies import get_theme_service
from control_plane.api.responses import UTF8JSONResponse
from control_plane.core.errors import (
    CityDisabledError, CityNotFoundError, ErrorContext, InternalError,
    InvalidRequestError,
)
from control_plane.core.lookup_results import (
    CityDisabled, CityNotFound, InvalidSlug, ThemeLookupFailed, ThemeServed,
)
from control_plane.schemas.theme import CityThemeResponse
from control_plane.services.theme_lookup import ThemeLookupService


class PathSegmentConvertor(Convertor):
    """Single path segment, possibly empty."""
    regex = "[^/]*"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("segment", PathSegmentConvertor())

router = APIRouter(prefix="/api/cities", tags=["cities"])


@router.get(
    "/{slug:segment}/theme",
    response_model=CityThemeResponse,
    response_class=UTF8JSONResponse,
)
async def get_city_theme(
    slug: str,
    service: ThemeLookupService = Depends(get_theme_service),
):
    """Resolve a city by slug and return its public theme."""
    result = await service.get_city_theme(slug)

    match result:
        case ThemeServed(theme=theme):
            return UTF8JSONResponse(
                content=CityThemeResponse.from_theme(theme).to_wire(),
            )
        case InvalidSlug(reason=reason):
            raise InvalidRequestError(reason)
        case CityNotFound(slug=missing):
            raise CityNotFoundError(missing)
        case CityDisabled(slug=disabled):
            raise CityDisabledError(disabled)
        case ThemeLookupFailed(slug=failed, cause=cause):
            raise InternalError(ErrorContext(
                slug=failed, debug_info={"cause": repr(cause)},
            ))

"""Theme Lookup Service: slug -> ThemeResult with a bounded-deadline store read.

Invariants:
    - Invalid slug is reported before the repository is called
    - At most one repository call per lookup, no retries
    - The read is abandoned once timeout_seconds elapse; caller cancellation
      propagates into the read unchanged
    - is_active is checked only after a successful fetch
    - Failures are logged once here with slug and cause; the result never
      carries them to the client

Design Decisions:
    - Repository injected at construction (CityRepository protocol): tests pass
      in-memory fakes, production passes SqlCityRepository
    - asyncio.wait_for wraps pool acquisition and query together
"""

import asyncio
import logging

from control_plane.core.enforce_slug import validate_slug
from control_plane.core.lookup_results import (
    CityDisabled, CityFound, CityMissing, CityNotFound, LookupFailed,
    ThemeLookupFailed, ThemeResult, ThemeServed,
)
from control_plane.core.repository_protocols import CityRepository
from control_plane.core.theme_projection import project_city_theme

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


class ThemeLookupService:
    """Resolves a city's public theme by slug."""

    def __init__(
        self,
        repository: CityRepository,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._repository = repository
        self._timeout_seconds = timeout_seconds

    async def get_city_theme(self, slug: str) -> ThemeResult:
        invalid = validate_slug(slug)
        if invalid is not None:
            return invalid

        try:
            lookup = await asyncio.wait_for(
                self._repository.find_by_slug(slug),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            return self._failed(slug, e, "timed out")

        match lookup:
            case CityMissing():
                return CityNotFound(slug=slug)
            case LookupFailed(cause=cause):
                return self._failed(slug, cause, "failed")
            case CityFound(city=city) if not city.is_active:
                return CityDisabled(slug=slug)
            case CityFound(city=city):
                return ThemeServed(theme=project_city_theme(city))

    @staticmethod
    def _failed(
        slug: str, cause: BaseException, what: str,
    ) -> ThemeLookupFailed:
        logger.error(
            f"City lookup {what} for slug={slug!r}: {cause!r}",
            extra={"slug": slug, "error_code": "INTERNAL_ERROR"},
            exc_info=cause,
        )
        return ThemeLookupFailed(slug=slug, cause=cause)

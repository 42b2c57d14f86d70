"""Run the Control Plane API with uvicorn: `python -m control_plane`."""

import logging

import uvicorn

from control_plane.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the server."""
    settings = get_settings()
    logger.info("Starting control-plane API at %s:%s", settings.host, settings.port)
    uvicorn.run(
        "control_plane.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

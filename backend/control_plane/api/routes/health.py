"""Health & Readiness Probes: liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /healthz always returns 200 "ok" if the process is up (liveness, no dependency checks)
    - GET /readyz returns 503 if the control database is unreachable (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse

from control_plane.api.responses import UTF8JSONResponse

router = APIRouter(tags=["health"])


@router.get("/healthz", response_class=PlainTextResponse)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return "ok"


@router.get("/readyz")
async def readiness_check(request: Request):
    """Readiness probe: includes control database connectivity."""
    db_manager = getattr(request.app.state, "db_manager", None)
    db_ok = await db_manager.health_check() if db_manager else False
    if not db_ok:
        return UTF8JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return UTF8JSONResponse(
        content={"status": "ready", "checks": {"database": "healthy"}},
    )

"""HTTP Middleware: CORS headers and per-request access logging.

Invariants:
    - Every response carries the CORS allow-origin/methods/headers triple
    - Any OPTIONS request short-circuits with 200 and an empty body
    - One access log line per request: method, path, status_code, duration_ms

Design Decisions:
    - Plain `async def (request, call_next)` middlewares registered with
      app.middleware("http"): the CORS policy is fixed, so Starlette's
      CORSMiddleware (which only answers preflights carrying Origin and
      Access-Control-Request-Method, with body "OK") does not fit
"""

import logging
import time
from typing import Any, Awaitable, Callable

from fastapi import Request, Response, status

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


async def cors_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Any]],
):
    """Attach CORS headers; answer OPTIONS without touching the router."""
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def request_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Any]],
):
    """Log method, path, status and latency for every request."""
    started = time.perf_counter()
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            f"{request.method} {request.url.path} -> {status_code} ({duration_ms}ms)",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            },
        )

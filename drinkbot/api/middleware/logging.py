"""Request/response logging middleware."""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from drinkbot.utils.monitoring import observe_request

logger = logging.getLogger("drinkbot.api")

UNMATCHED_ROUTE = "unmatched"


def _route_label(request: Request) -> str:
    # Label by route template; every unmatched path shares one series.
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured logging and request metrics for inbound HTTP requests."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start_time

        observe_request(request.method, _route_label(request), response.status_code, duration)
        logger.info(
            "request.completed",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status": response.status_code,
                "duration_ms": round(duration * 1000, 2),
                "client": request.client.host if request.client else None,
            },
        )

        return response

from __future__ import annotations

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger("noteful.requests")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set up process-wide logging; called by the entry point, never on import."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request: method, path, status and duration."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.error("%s %s failed after %.2fms: %s", method, path, duration_ms, type(exc).__name__)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %s (%.2fms)", method, path, response.status_code, duration_ms)
        return response

"""Middleware for request ID tracking and per-feature request logging"""
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import structlog


logger = structlog.get_logger(__name__)

MAX_REQUEST_ID_LENGTH = 128


def feature_for_path(path: str) -> str:
    """Name the assistant feature a path belongs to, e.g. ``/api/case-law`` -> ``case_law``."""
    if not path.startswith("/api/"):
        return "site"
    segment = path[len("/api/"):].split("/", 1)[0]
    return segment.replace("-", "_") or "site"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Adopt the caller's X-Request-Id, or mint one, and echo it back"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-Id", "").strip()
        if not request_id or len(request_id) > MAX_REQUEST_ID_LENGTH:
            request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers["X-Request-Id"] = request_id

        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request with its feature and timing.

    ``feature``, ``method`` and ``path`` are bound into the structlog context
    so provider and parsing logs emitted while serving the request carry them.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        feature = feature_for_path(request.url.path)

        structlog.contextvars.bind_contextvars(
            feature=feature,
            method=request.method,
            path=request.url.path,
        )
        logger.info("request_started")

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request_failed",
                latency_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        logger.info(
            "request_completed",
            status_code=response.status_code,
            latency_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return response

"""
Request logging middleware.

Every relayed request is logged once on completion, together with the
status the Sheets web app returned and how long the upstream hop took.
"""

import logging
import time
import uuid
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("yuzuorders.api")


def record_upstream(request: Request, status_code: int, duration_ms: float):
    """Remember the upstream outcome so the middleware can report it."""
    request.state.upstream_status = status_code
    request.state.upstream_ms = duration_ms


def _upstream_status(request: Request) -> Optional[int]:
    return getattr(request.state, "upstream_status", None)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs proxied requests with a short request ID, total time and the
    upstream hop.

    Adds ``X-Request-ID`` and ``X-Response-Time-Ms`` to every response, and
    ``X-Upstream-Status``/``X-Upstream-Time-Ms`` when the request reached
    the web app.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            duration = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"[{request_id}] {request.method} {request.url.path} - "
                f"Error after {duration:.2f}ms: {str(e)}"
            )
            raise

        duration = (time.perf_counter() - start_time) * 1000
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time-Ms"] = f"{duration:.2f}"

        upstream_status = _upstream_status(request)
        if upstream_status is None:
            # Never reached the web app: a 5xx here is the relay's own failure
            upstream_note = "no upstream"
            if response.status_code >= 500:
                log_level = logging.ERROR
            elif response.status_code >= 400:
                log_level = logging.WARNING
            else:
                log_level = logging.INFO
        else:
            upstream_ms = getattr(request.state, "upstream_ms", 0.0)
            response.headers["X-Upstream-Status"] = str(upstream_status)
            response.headers["X-Upstream-Time-Ms"] = f"{upstream_ms:.2f}"
            upstream_note = f"upstream {upstream_status} in {upstream_ms:.2f}ms"
            log_level = logging.INFO if upstream_status < 400 else logging.WARNING

        logger.log(
            log_level,
            f"[{request_id}] {request.method} {request.url.path} - "
            f"{response.status_code} in {duration:.2f}ms ({upstream_note})"
        )

        return response


def get_request_id(request: Request) -> str:
    """Get the request ID from the current request."""
    return getattr(request.state, "request_id", "unknown")

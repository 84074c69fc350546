"""
Notes Frontend - Request Logging Middleware
============================================

What:  One access-log line per HTTP request: method, path, status,
       duration, request ID, client IP.
How:   Wraps call_next, measures with time.perf_counter, picks the level
       from the status class (5xx ERROR, 4xx WARNING, else INFO).
       Redirects include their target.

Request bodies are never logged: they carry note text.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notes_frontend.middleware.request_id import request_id_var

logger = logging.getLogger("notes_frontend.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    /health is skipped; probes hit it every few seconds.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path == "/health":
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        location = response.headers.get("location")
        target = f" -> {location}" if location else ""

        logger.log(
            log_level,
            "%s %s %d%s %.1fms [%s] from %s",
            method,
            path,
            status,
            target,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response

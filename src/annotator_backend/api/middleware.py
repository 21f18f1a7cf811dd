"""HTTP middleware shared by every route."""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("annotator_backend.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of each request.

    Bodies are never logged; they carry credentials and annotation content.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        client = request.client.host if request.client else "unknown"
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed after %.1fms from %s",
                request.method,
                request.url.path,
                (time.perf_counter() - start_time) * 1000,
                client,
            )
            raise
        duration_ms = (time.perf_counter() - start_time) * 1000

        status_code = response.status_code
        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            "%s %s %d %.1fms from %s",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
            client,
        )
        return response

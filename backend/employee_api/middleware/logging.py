"""
Employee Directory — Access Logging Middleware
================================================

What:  One log line per request with method, path, status, duration and
       request id, on the `employee_api.access` logger.
When:  Runs inside RequestIDMiddleware so the id is already set.

Level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO.
/health is skipped; probes hit it every few seconds.

Request bodies are never logged (they carry names and emails).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from employee_api.middleware.request_id import request_id_var

logger = logging.getLogger("employee_api.access")

_SKIP_PATHS = frozenset({"/health"})


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Structured access log for every non-probe request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # RequestIDMiddleware turns this into the 500 body
            self._log(request, path, 500, start_time)
            raise

        self._log(request, path, response.status_code, start_time)
        return response

    @staticmethod
    def _log(request: Request, path: str, status: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            _level_for(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

"""
Employee Directory — Request ID Middleware
============================================

What:  Tags every request with a correlation id and echoes it back in the
       X-Request-ID response header.
How:   Reuses the client's X-Request-ID when sent, otherwise generates an
       8-character id. The id is stored in a ContextVar so loggers and
       exception handlers can read it without access to the request.

Unexpected errors:
    This is the outermost application middleware, so it also turns any
    exception no handler claimed into the generic 500 body. Building the
    response here keeps the request id in both the body and the header;
    Starlette's own server-error handler runs after the ContextVar is gone.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

# Coroutine-local: concurrent requests on one thread each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns and propagates a per-request correlation id."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
            response = JSONResponse(
                status_code=500,
                content={
                    "error": "internal_server_error",
                    "message": "An unexpected error occurred. Please try again or contact support.",
                    "request_id": rid,
                },
            )
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response

"""
console_auth.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Generate/propagate request IDs (also forwarded to the session endpoint).
- Bind request metadata into structlog contextvars.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "x-request-id"


def request_id_of(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Every request gets a request id, stored on `request.state` and bound into
    structlog contextvars for the lifetime of the request.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        try:
            response: Response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# The session router reads `request_id_of(request)` so the upstream console can
# correlate its own logs with ours.

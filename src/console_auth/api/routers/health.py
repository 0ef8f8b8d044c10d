"""
console_auth.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) once the outbound HTTP client is up.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(request: Request) -> dict[str, str]:
    # The session endpoint itself is not probed; its outages are a normal "no user" result.
    http = getattr(request.app.state, "http", None)
    if http is None or http.is_closed:
        raise HTTPException(status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="HTTP client not ready")
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# Kubernetes typically uses /healthz for liveness and /readyz for readiness gating.

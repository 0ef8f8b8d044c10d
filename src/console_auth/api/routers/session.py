from __future__ import annotations

from typing import Any

import httpx
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from console_auth.api.deps import http_client, settings_from_app
from console_auth.observability.middleware import REQUEST_ID_HEADER, request_id_of
from console_auth.session_clients.console_http import SessionUserResolver
from console_auth.settings import Settings

router = APIRouter(prefix="/v1/console", tags=["console"])


class SessionResponse(BaseModel):
    authenticated: bool
    user: dict[str, Any] | None = None


@router.get("/session", response_model=SessionResponse)
async def current_session(
    request: Request,
    http: httpx.AsyncClient = Depends(http_client),
    settings: Settings = Depends(settings_from_app),
) -> SessionResponse:
    request_id = request_id_of(request)
    options = settings.session_transport(
        cookies=request.cookies,
        headers={REQUEST_ID_HEADER: request_id} if request_id else None,
    )

    user = await SessionUserResolver(http=http, options=options).resolve_current_user()
    if user is None:
        return SessionResponse(authenticated=False)
    return SessionResponse(authenticated=True, user=user.to_dict())

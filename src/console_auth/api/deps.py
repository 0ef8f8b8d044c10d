"""
console_auth.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and the shared HTTP client.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

import httpx
from fastapi import Request

from console_auth.settings import Settings


def settings_from_app(request: Request) -> Settings:
    # The app factory receives settings explicitly; routers must see the same object.
    return request.app.state.settings  # type: ignore[attr-defined]


def http_client(request: Request) -> httpx.AsyncClient:
    # Created on app startup in `console_auth.api.app.create_app`.
    return request.app.state.http  # type: ignore[attr-defined]

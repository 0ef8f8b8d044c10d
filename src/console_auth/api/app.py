"""
console_auth.api.app

FastAPI app factory for the console session bridge.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Own the shared outbound `httpx.AsyncClient` used for session lookups.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from console_auth import __version__
from console_auth.api.routers.health import router as health_router
from console_auth.api.routers.session import router as session_router
from console_auth.observability.logging import configure_logging, get_logger
from console_auth.observability.middleware import RequestContextMiddleware
from console_auth.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, session_url=settings.session_url)
        # One pooled client per process; `transport` lets tests stand in for the console.
        app.state.http = httpx.AsyncClient(
            transport=transport,
            timeout=settings.session_timeout_s,
        )
        try:
            yield
        finally:
            await app.state.http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Console Session Bridge",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(session_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Business logic lives in `session_clients`; this module only wires it to HTTP.

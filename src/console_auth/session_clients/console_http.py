"""
console_auth.session_clients.console_http

HTTP client boundary for the console session endpoint.

Responsibilities:
- Ask the console session endpoint who the current user is (one GET, no retries).
- Attach ambient credentials (cookies) only when the transport options say so.
- Normalize the response into a `ConsoleUser`, or a tagged failure reason.
- Never raise to the caller: every failure collapses to "no user".
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx
import structlog

from console_auth.auth.models import ConsoleUser, InvalidSessionUser
from console_auth.observability.logging import get_logger

DEFAULT_SESSION_URL = "https://console.svc.plus/api/auth/session"
DEFAULT_TIMEOUT_S = 10.0


class SessionFailure(enum.StrEnum):
    # Why a lookup produced no user. Callers that only need present/absent can ignore it.
    network_error = "network_error"
    http_status = "http_status"
    malformed_body = "malformed_body"
    missing_user = "missing_user"
    invalid_user = "invalid_user"
    unexpected_error = "unexpected_error"


@dataclass(frozen=True, slots=True)
class SessionTransportOptions:
    url: str = DEFAULT_SESSION_URL
    # Equivalent of `credentials: "include"`: send cookies with the request.
    include_credentials: bool = True
    cookies: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SessionLookup:
    """
    Outcome of one session lookup: either `user` or `failure` is set, never both.
    """

    user: ConsoleUser | None = None
    failure: SessionFailure | None = None
    detail: str | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.user is not None


class SessionUserResolver:
    """
    Resolves the current console user from the session endpoint.

    The `httpx.AsyncClient` is injected and owned by the caller; timeouts and
    connection pooling are whatever that client is configured with.
    """

    def __init__(
        self,
        *,
        http: httpx.AsyncClient,
        options: SessionTransportOptions | None = None,
        log: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._http = http
        self._options = options or SessionTransportOptions()
        self._log = log or get_logger(__name__)

    async def resolve_current_user(self) -> ConsoleUser | None:
        return (await self.lookup()).user

    async def lookup(self) -> SessionLookup:
        try:
            return await self._lookup()
        except Exception as e:  # noqa: BLE001 - nothing escapes the resolver boundary
            return self._failed(SessionFailure.unexpected_error, error=str(e), error_type=type(e).__name__)

    async def _lookup(self) -> SessionLookup:
        try:
            response = await self._http.send(self._build_request())
        except httpx.HTTPError as e:
            return self._failed(SessionFailure.network_error, error=str(e), error_type=type(e).__name__)

        if not response.is_success:
            # Expected for signed-out users (401/403); not worth a warning.
            return SessionLookup(
                failure=SessionFailure.http_status,
                status_code=response.status_code,
                detail=response.reason_phrase,
            )

        try:
            payload = response.json()
        except ValueError as e:
            return self._failed(SessionFailure.malformed_body, error=str(e), error_type=type(e).__name__)

        if not isinstance(payload, Mapping):
            return self._failed(
                SessionFailure.malformed_body,
                error=f"session body must be an object, got {type(payload).__name__}",
                error_type="TypeError",
            )

        user = payload.get("user")
        if not user:
            return SessionLookup(failure=SessionFailure.missing_user)

        try:
            return SessionLookup(user=ConsoleUser.from_session_user(user))
        except InvalidSessionUser as e:
            return self._failed(SessionFailure.invalid_user, error=str(e), error_type=type(e).__name__)

    def _build_request(self) -> httpx.Request:
        opts = self._options
        request = self._http.build_request("GET", opts.url, headers=dict(opts.headers))

        # The shared client may hold cookies from earlier lookups; only the caller's own are sent.
        request.headers.pop("cookie", None)
        if opts.include_credentials and opts.cookies:
            httpx.Cookies(dict(opts.cookies)).set_cookie_header(request)
        return request

    def _failed(self, reason: SessionFailure, *, error: str, error_type: str) -> SessionLookup:
        self._log.warning(
            "console_user_fetch_failed",
            reason=reason.value,
            error=error,
            error_type=error_type,
            url=self._options.url,
        )
        return SessionLookup(failure=reason, detail=error)


async def fetch_console_user(
    *,
    http: httpx.AsyncClient | None = None,
    options: SessionTransportOptions | None = None,
) -> ConsoleUser | None:
    """
    One-shot lookup. Opens (and closes) a private client when `http` is not given.
    """

    if http is not None:
        return await SessionUserResolver(http=http, options=options).resolve_current_user()

    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT_S) as client:
        return await SessionUserResolver(http=client, options=options).resolve_current_user()


# --- Module Notes -----------------------------------------------------------
# Status failures and a missing `user` are silent: they are the normal signed-out
# path. Everything else logs exactly one `console_user_fetch_failed` warning.

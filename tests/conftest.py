"""
tests.conftest

Shared fixtures for the console_auth test suite.

Responsibilities:
- Stand in for the console session endpoint with `httpx.MockTransport`.
- Reset structlog configuration between tests.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
import structlog


class FakeConsole:
    """
    Scripted session endpoint: replies with `body`/`status_code` and records requests.
    """

    def __init__(self) -> None:
        self.body: Any = {}
        self.status_code = 200
        self.raw: bytes | None = None
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def reply(self, body: Any = None, *, status_code: int = 200, raw: bytes | None = None) -> None:
        self.body = body
        self.status_code = status_code
        self.raw = raw

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_cookie_header(self) -> str | None:
        return self.requests[-1].headers.get("cookie")


@pytest.fixture
def console() -> FakeConsole:
    return FakeConsole()


@pytest.fixture
def make_client(console: FakeConsole) -> Callable[..., httpx.AsyncClient]:
    def factory(**kwargs: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=console.transport, **kwargs)

    return factory


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()

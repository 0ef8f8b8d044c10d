"""
console_auth.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the resolver and the HTTP surface.
- Build explicit transport options for session lookups.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from console_auth.session_clients.console_http import (
    DEFAULT_SESSION_URL,
    SessionTransportOptions,
)


class Settings(BaseSettings):
    """
    Settings are read from `CONSOLE_AUTH_*` environment variables.
    """

    model_config = SettingsConfigDict(env_prefix="CONSOLE_AUTH_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "console-auth"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Session endpoint
    session_url: str = DEFAULT_SESSION_URL
    session_include_credentials: bool = True
    session_timeout_s: float = Field(default=10.0, gt=0)

    def session_transport(
        self,
        *,
        cookies: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> SessionTransportOptions:
        # Credentials are dropped here when disabled so callers never forward them by accident.
        include = self.session_include_credentials
        return SessionTransportOptions(
            url=self.session_url,
            include_credentials=include,
            cookies=dict(cookies or {}) if include else {},
            headers=dict(headers or {}),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Timeouts are owned by the shared AsyncClient built in `api.app`; the resolver
# itself never sets one.

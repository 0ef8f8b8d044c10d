"""
console_auth.api.__main__

Entrypoint for running the API via `python -m console_auth.api`.

Responsibilities:
- Load settings.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from console_auth.api.app import create_app
from console_auth.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Configuration comes only from `CONSOLE_AUTH_*` env vars; there are no CLI flags.

"""
console_auth.session_clients

Session client package.

Responsibilities:
- Provide the client boundary for asking the console who the current user is.
"""

from console_auth.session_clients.console_http import (
    SessionFailure,
    SessionLookup,
    SessionTransportOptions,
    SessionUserResolver,
    fetch_console_user,
)

__all__ = [
    "SessionFailure",
    "SessionLookup",
    "SessionTransportOptions",
    "SessionUserResolver",
    "fetch_console_user",
]

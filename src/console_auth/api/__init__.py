"""
console_auth.api

API package for the console session bridge.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers stay thin: collect request credentials, delegate to the resolver.

"""
console_auth.auth

Console identity package.

Responsibilities:
- The normalized console user record and its construction from session payloads.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# No enforcement lives here: callers decide what an absent user means.

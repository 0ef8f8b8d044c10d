"""
console_auth.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for log enrichment and outbound lookups.
"""

# Package marker.

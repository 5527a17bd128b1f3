"""
oidc_toolkit.observability

Observability helpers.

Responsibilities:
- Structured logging configuration (structlog).
"""

# Package marker.

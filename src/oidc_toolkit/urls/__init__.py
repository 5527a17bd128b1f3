"""
oidc_toolkit.urls

URL helpers for protocol parameters carried in query strings.
"""

# Package marker.

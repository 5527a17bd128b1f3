"""
oidc_toolkit.auth

Claims-based identity package.

Responsibilities:
- Immutable claim/identity/principal models.
- Building principals from decoded claim payloads.
- Merging partial principals into a composite principal.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here validates tokens; callers hand over payloads they already trust.

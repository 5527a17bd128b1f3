"""
oidc_toolkit.reflection

Runtime type introspection helpers.

Responsibilities:
- Locate the parametrized generic bases a class derives from or implements.
"""

# Package marker.

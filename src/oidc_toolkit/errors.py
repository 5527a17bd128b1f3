"""
oidc_toolkit.errors

Exception types shared by every toolkit component.

Responsibilities:
- Provide a single base class callers can catch (`OidcToolkitError`).
- Report contract violations (missing or malformed arguments) with the parameter name.
"""

from __future__ import annotations


class OidcToolkitError(Exception):
    pass


class InvalidArgumentError(OidcToolkitError, ValueError):
    """
    Raised when a required argument is missing or does not satisfy the call contract.
    """

    def __init__(self, parameter: str, message: str | None = None) -> None:
        super().__init__(message or f"The '{parameter}' argument cannot be None.")
        self.parameter = parameter


def ensure_not_none(value: object, parameter: str) -> None:
    if value is None:
        raise InvalidArgumentError(parameter)


# --- Module Notes -----------------------------------------------------------
# InvalidArgumentError also derives from ValueError so generic callers that only
# know the standard library still handle it.

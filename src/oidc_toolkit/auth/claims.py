"""
oidc_toolkit.auth.claims

Adapter from decoded claim payloads to `Principal`.

Responsibilities:
- Flatten JSON members (token payloads, userinfo responses) into ordered claims.
- Tag each claim with a value type so consumers can tell "1" from 1.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from oidc_toolkit.auth.models import (
    DEFAULT_AUTHENTICATION_TYPE,
    DEFAULT_ISSUER,
    Claim,
    ClaimsIdentity,
    ClaimValueTypes,
    Principal,
)
from oidc_toolkit.errors import InvalidArgumentError, ensure_not_none


def principal_from_claims(
    payload: Mapping[str, Any],
    *,
    issuer: str = DEFAULT_ISSUER,
    original_issuer: str | None = None,
    authentication_type: str | None = DEFAULT_AUTHENTICATION_TYPE,
) -> Principal:
    ensure_not_none(payload, "payload")
    if not isinstance(payload, Mapping):
        raise InvalidArgumentError("payload", "The 'payload' argument must be a JSON object.")

    claims: list[Claim] = []
    for name, member in payload.items():
        # Arrays expand to one claim per element (e.g. "amr", "aud", "roles").
        items = member if isinstance(member, list | tuple) else [member]
        for item in items:
            if item is None:
                continue
            value, value_type = _claim_value(item)
            claims.append(
                Claim(
                    type=name,
                    value=value,
                    value_type=value_type,
                    issuer=issuer,
                    # Claims relayed by another party keep the first issuer here.
                    original_issuer=original_issuer or issuer,
                )
            )

    return Principal.of(
        ClaimsIdentity(claims=tuple(claims), authentication_type=authentication_type)
    )


def _claim_value(item: Any) -> tuple[str, str]:
    # bool is checked first: it is a subclass of int.
    if isinstance(item, bool):
        return ("true" if item else "false"), ClaimValueTypes.BOOLEAN
    if isinstance(item, int):
        return str(item), ClaimValueTypes.INTEGER
    if isinstance(item, float):
        return repr(item), ClaimValueTypes.DOUBLE
    if isinstance(item, str):
        return item, ClaimValueTypes.STRING
    return json.dumps(item, separators=(",", ":"), ensure_ascii=False), ClaimValueTypes.JSON


# --- Module Notes -----------------------------------------------------------
# Signature and expiry checks happen before this adapter is called.

"""
oidc_toolkit.auth.merge

Composite principal construction.

Responsibilities:
- Merge the principals extracted from several sources (tokens, userinfo) into one.
- Deduplicate claims on (type, value), first occurrence wins.
"""

from __future__ import annotations

from oidc_toolkit.auth.models import DEFAULT_AUTHENTICATION_TYPE, Claim, ClaimsIdentity, Principal
from oidc_toolkit.observability.logging import get_logger

log = get_logger(__name__)


def merge_principals(
    *principals: Principal | None,
    authentication_type: str = DEFAULT_AUTHENTICATION_TYPE,
) -> Principal:
    # Delegation-only flows may not resolve any user identity at all. An unauthenticated,
    # claim-less principal still lets the caller report a successful outcome.
    if not any(principal is not None and principal.is_authenticated for principal in principals):
        log.debug("principals_merged", authenticated=False, sources=len(principals))
        return Principal.of(ClaimsIdentity())

    claims: list[Claim] = []
    seen: set[tuple[str, str]] = set()

    for principal in principals:
        # None when no value could be extracted from the corresponding token.
        if principal is None:
            continue

        for claim in principal.claims:
            key = (claim.type, claim.value)
            if key in seen:
                continue

            seen.add(key)
            claims.append(claim)

    log.debug("principals_merged", authenticated=True, sources=len(principals), claims=len(claims))
    return Principal.of(
        ClaimsIdentity(claims=tuple(claims), authentication_type=authentication_type)
    )


# --- Module Notes -----------------------------------------------------------
# Only the primary identity of each principal decides authentication, but claims
# are collected from every identity the principal carries.

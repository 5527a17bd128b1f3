"""
oidc_toolkit.auth.models

Auth domain models.

Responsibilities:
- Define the claims-based identity types (`Claim`, `ClaimsIdentity`, `Principal`).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

# Label given to identities built from validated tokens.
DEFAULT_AUTHENTICATION_TYPE = "AuthenticationTypes.Federation"
DEFAULT_ISSUER = "LOCAL AUTHORITY"

NAME_CLAIM_TYPE = "name"
ROLE_CLAIM_TYPE = "role"


class ClaimValueTypes:
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DOUBLE = "double"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class Claim:
    """
    A single (type, value) statement about a subject.

    Issuer metadata is carried along but ignored when looking up claims.
    """

    type: str
    value: str
    value_type: str = ClaimValueTypes.STRING
    issuer: str = DEFAULT_ISSUER
    original_issuer: str | None = None

    def matches(self, type: str, value: str) -> bool:
        return self.type == type and self.value == value


@dataclass(frozen=True, slots=True)
class ClaimsIdentity:
    claims: tuple[Claim, ...] = ()
    # None (or "") marks the identity as unauthenticated.
    authentication_type: str | None = None
    name_claim_type: str = NAME_CLAIM_TYPE
    role_claim_type: str = ROLE_CLAIM_TYPE

    @property
    def is_authenticated(self) -> bool:
        return bool(self.authentication_type)

    @property
    def name(self) -> str | None:
        return self.find_first(self.name_claim_type)

    def find_first(self, type: str) -> str | None:
        for claim in self.claims:
            if claim.type == type:
                return claim.value
        return None

    def find_all(self, type: str) -> list[str]:
        return [claim.value for claim in self.claims if claim.type == type]

    def has_claim(self, type: str, value: str) -> bool:
        return any(claim.matches(type, value) for claim in self.claims)


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Security subject wrapping one or more identities.

    The first identity is the primary one.
    """

    identities: tuple[ClaimsIdentity, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, identity: ClaimsIdentity) -> Principal:
        return cls(identities=(identity,))

    @property
    def identity(self) -> ClaimsIdentity | None:
        return self.identities[0] if self.identities else None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None and self.identity.is_authenticated

    @property
    def claims(self) -> Iterator[Claim]:
        for identity in self.identities:
            yield from identity.claims

    @property
    def roles(self) -> frozenset[str]:
        return frozenset(
            claim.value
            for identity in self.identities
            for claim in identity.claims
            if claim.type == identity.role_claim_type
        )


# --- Module Notes -----------------------------------------------------------
# Keep these models free of I/O; they are shared by the payload adapter, the
# merger and the CLI.

"""
oidc_toolkit.reflection.generics

Generic base type resolution.

Responsibilities:
- Find the instantiations of a generic definition (`Store` in `Store[Token]`) among
  the bases of a class, following `__orig_bases__` and substituting type variables.
- Treat generic `Protocol`s as interfaces (any depth, any branch) and every other
  generic class as part of the single primary-base chain.

Example:

    class TokenStore(MemoryStore[AccessToken], Revocable[AccessToken]): ...

    find_generic_base_types(TokenStore, MemoryStore)  # (MemoryStore[AccessToken],)
    find_generic_base_type(TokenStore, Revocable)     # Revocable[AccessToken]
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, Protocol, get_args, get_origin

from oidc_toolkit.errors import InvalidArgumentError, ensure_not_none

_MARKERS: tuple[Any, ...] = (Generic, Protocol, object)


def find_generic_base_type(type_: Any, definition: type) -> Any | None:
    """
    Return the first base matching `definition`, or None.
    """

    _validate(type_, definition)
    return next(_iter_matches(type_, definition), None)


def find_generic_base_types(type_: Any, definition: type) -> tuple[Any, ...]:
    """
    Return every base of `type_` that instantiates `definition`.

    Interface definitions are matched against all implemented protocols in
    depth-first declaration order; class definitions against the primary base chain,
    starting at `type_` itself, derived-to-base.
    """

    _validate(type_, definition)
    return tuple(_iter_matches(type_, definition))


def is_generic_definition(candidate: Any) -> bool:
    if not isinstance(candidate, type) or get_origin(candidate) is not None:
        return False
    if candidate in _MARKERS:
        return False
    # typing generics must still have free type variables; builtins and
    # collections.abc classes are generic whenever they can be subscripted.
    if issubclass(candidate, Generic):
        return bool(getattr(candidate, "__parameters__", ()))
    return hasattr(candidate, "__class_getitem__")


def _validate(type_: Any, definition: Any) -> None:
    ensure_not_none(type_, "type_")
    ensure_not_none(definition, "definition")
    if not is_generic_definition(definition):
        raise InvalidArgumentError(
            "definition",
            f"The 'definition' argument must be an open generic definition, got {definition!r}.",
        )


def _iter_matches(type_: Any, definition: type) -> Iterator[Any]:
    candidates = _iter_interfaces(type_) if _is_interface(definition) else _iter_base_chain(type_)
    for candidate in candidates:
        # Bare classes are never instantiations, only their parametrized aliases are.
        if get_origin(candidate) is definition:
            yield candidate


def _iter_interfaces(type_: Any) -> Iterator[Any]:
    seen: set[Any] = set()
    stack = list(reversed(_direct_bases(type_)))
    while stack:
        base = stack.pop()
        if base in seen:
            continue
        seen.add(base)
        if _is_interface(base):
            yield base
        stack.extend(reversed(_direct_bases(base)))


def _iter_base_chain(type_: Any) -> Iterator[Any]:
    candidate = type_
    while candidate is not None:
        yield candidate
        candidate = next((b for b in _direct_bases(candidate) if not _is_interface(b)), None)


def _direct_bases(candidate: Any) -> list[Any]:
    origin = get_origin(candidate) or candidate
    if not isinstance(origin, type):
        return []

    # Read from the class dict: a subclass without generic bases would otherwise
    # inherit its parent's __orig_bases__.
    bases = origin.__dict__.get("__orig_bases__", origin.__bases__)
    mapping = dict(zip(getattr(origin, "__parameters__", ()), get_args(candidate)))
    return [_substitute(base, mapping) for base in bases if not _is_marker(base)]


def _substitute(base: Any, mapping: dict[Any, Any]) -> Any:
    parameters = getattr(base, "__parameters__", ())
    if not mapping or not parameters or get_origin(base) is None:
        return base
    return base[tuple(mapping.get(parameter, parameter) for parameter in parameters)]


def _is_marker(base: Any) -> bool:
    return (get_origin(base) or base) in _MARKERS


def _is_interface(candidate: Any) -> bool:
    origin = get_origin(candidate) or candidate
    if not isinstance(origin, type):
        return False
    return bool(getattr(origin, "_is_protocol", False)) or origin.__module__ == "collections.abc"


# --- Module Notes -----------------------------------------------------------
# Python keeps generic bases on the class (`__orig_bases__`), so there is no
# registry to maintain: every call walks the live class graph and caches nothing.
# collections.abc classes count as interfaces next to Protocols. Their own bases
# are not parametrized, so `Mapping[str, int]` does not imply `Iterable[str]`.
# An open definition is not an instantiation of itself: searching `Repository`
# for `Repository` yields nothing.
# Any subscriptable non-typing class is accepted as a definition, including
# subclasses such as `class Tags(list[str])`.

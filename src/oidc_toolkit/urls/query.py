"""
oidc_toolkit.urls.query

Query string building and parsing.

Responsibilities:
- Append (possibly multi-valued or flag-style) parameters to an existing URL.
- Parse query strings into ordered, multi-valued parameter sets.

Encoding follows the query-component rules: only ASCII letters, digits and `-_.~` are
left as-is and a space is `%20`, never `+`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import TypeAlias
from urllib.parse import quote, unquote

import httpx

from oidc_toolkit.errors import ensure_not_none
from oidc_toolkit.observability.logging import get_logger

log = get_logger(__name__)

# A bare string is accepted as a single value; an empty sequence means "name only".
QueryValues: TypeAlias = Sequence[str | None] | str | None
QueryParameters: TypeAlias = Mapping[str, QueryValues]

# Both "&" and the legacy ";" are accepted as separators when parsing.
_SEPARATORS = re.compile(r"[&;]")


def append_query_parameter(
    address: httpx.URL | str, name: str, value: str | None = None
) -> httpx.URL:
    ensure_not_none(address, "address")
    ensure_not_none(name, "name")
    return append_query_parameters(address, {name: [value]})


def append_query_parameters(address: httpx.URL | str, parameters: QueryParameters) -> httpx.URL:
    """
    Append `parameters` to the query of `address`, keeping any parameter already present.

    Parameters and their values are emitted in iteration order. A parameter without
    values, or a None/empty value, is emitted as the bare name.
    """

    ensure_not_none(address, "address")
    ensure_not_none(parameters, "parameters")

    url = address if isinstance(address, httpx.URL) else httpx.URL(address)
    if not parameters:
        return url

    query = url.query.decode("ascii")
    for name, values in parameters.items():
        if values is None or isinstance(values, str):
            values = [values]

        for value in values or [None]:
            if query:
                query += "&"

            query += _escape(name)
            if value:
                query += "=" + _escape(value)

    return url.copy_with(query=query.encode("ascii"))


def parse_query(query: str) -> dict[str, list[str]]:
    """
    Parse a query string (with or without its leading "?") into ordered parameters.

    Keys keep their first-seen order and values the order they appeared in. A segment
    without "=" yields an empty value. Segments whose decoded key is empty are
    dropped, value included; malformed input is never rejected.
    """

    ensure_not_none(query, "query")

    parameters: dict[str, list[str]] = {}
    for segment in _SEPARATORS.split(query.lstrip("?")):
        if not segment:
            continue

        key, _, value = segment.partition("=")
        key = unquote(key)
        if not key:
            log.debug("query_segment_dropped", reason="empty_key")
            continue

        parameters.setdefault(key, []).append(unquote(value))

    return parameters


def _escape(value: str) -> str:
    return quote(value, safe="")


# --- Module Notes -----------------------------------------------------------
# Values parsed here are untrusted network input; the parser tolerates anything and
# leaves validation of individual parameters to the protocol handlers.

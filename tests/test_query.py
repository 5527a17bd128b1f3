"""
tests.test_query

Query string building and parsing.

Responsibilities:
- Appending parameters keeps the existing query and the rest of the URL intact.
- Encoding uses %20 for spaces and leaves only unreserved characters unescaped.
- Parsing accepts "&" and ";", groups repeated keys and drops key-less segments.
"""

from __future__ import annotations

import httpx
import pytest

from oidc_toolkit.errors import InvalidArgumentError
from oidc_toolkit.urls.query import append_query_parameter, append_query_parameters, parse_query


def test_append_single_parameter() -> None:
    url = append_query_parameter("https://client.example/cb?state=1#frag", "code", "a b")
    assert str(url) == "https://client.example/cb?state=1&code=a%20b#frag"
    assert url.fragment == "frag"
    assert url.path == "/cb"


def test_append_single_parameter_without_value_is_a_flag() -> None:
    assert str(append_query_parameter("https://client.example/cb", "prompt")) == (
        "https://client.example/cb?prompt"
    )
    assert str(append_query_parameter("https://client.example/cb", "prompt", "")) == (
        "https://client.example/cb?prompt"
    )


def test_append_multiple_values_and_flags_in_order() -> None:
    url = append_query_parameters(
        "https://server.example/authorize",
        {"scope": ["openid", "profile"], "offline": [], "state": "xyz", "nonce": None},
    )
    assert url.query == b"scope=openid&scope=profile&offline&state=xyz&nonce"


def test_append_keeps_existing_parameters() -> None:
    url = append_query_parameters(
        httpx.URL("https://server.example/authorize?client_id=app"), {"a": ["1", ""]}
    )
    assert url.query == b"client_id=app&a=1&a"
    assert url.host == "server.example"
    assert url.scheme == "https"


def test_append_empty_parameters_returns_address_unchanged() -> None:
    address = httpx.URL("https://server.example/authorize?x=1#f")
    assert append_query_parameters(address, {}) is address
    assert append_query_parameters("https://server.example/p", {}) == httpx.URL(
        "https://server.example/p"
    )


def test_append_escapes_reserved_characters() -> None:
    url = append_query_parameter("https://client.example/", "redirect uri", "a+b/c=d&e~f-g_h.i")
    assert url.query == b"redirect%20uri=a%2Bb%2Fc%3Dd%26e~f-g_h.i"


def test_append_escapes_non_ascii_as_utf8() -> None:
    url = append_query_parameter("https://client.example/", "name", "José")
    assert url.query == b"name=Jos%C3%A9"


@pytest.mark.parametrize(
    ("address", "parameters"),
    [(None, {"a": ["1"]}), ("https://client.example/", None)],
)
def test_append_rejects_none(address: object, parameters: object) -> None:
    with pytest.raises(InvalidArgumentError):
        append_query_parameters(address, parameters)  # type: ignore[arg-type]


def test_append_single_rejects_none_address() -> None:
    with pytest.raises(InvalidArgumentError) as exc:
        append_query_parameter(None, "a", "1")  # type: ignore[arg-type]
    assert exc.value.parameter == "address"


def test_parse_accepts_both_separators_and_groups_keys() -> None:
    assert parse_query("a=1&a=2;b") == {"a": ["1", "2"], "b": [""]}


def test_parse_drops_empty_key_and_empty_segments() -> None:
    assert parse_query("=x&&a=1") == {"a": ["1"]}
    assert parse_query("&;&") == {}
    assert parse_query("") == {}


def test_parse_strips_leading_question_mark() -> None:
    assert parse_query("?scope=openid%20profile&state=xyz") == {
        "scope": ["openid profile"],
        "state": ["xyz"],
    }


def test_parse_preserves_first_seen_key_order() -> None:
    parsed = parse_query("z=1&a=2&z=3")
    assert list(parsed) == ["z", "a"]
    assert parsed["z"] == ["1", "3"]


def test_parse_splits_on_first_equals_only() -> None:
    assert parse_query("a=b=c") == {"a": ["b=c"]}


def test_parse_does_not_decode_plus_as_space() -> None:
    assert parse_query("q=a+b&r=a%20b") == {"q": ["a+b"], "r": ["a b"]}


def test_parse_tolerates_malformed_escapes() -> None:
    assert parse_query("a=%zz&%3D=1") == {"a": ["%zz"], "=": ["1"]}


def test_parse_keeps_whitespace_keys_but_drops_empty_ones() -> None:
    assert parse_query("%20=1") == {" ": ["1"]}
    assert parse_query("=&b=2") == {"b": ["2"]}


def test_parse_rejects_none() -> None:
    with pytest.raises(InvalidArgumentError):
        parse_query(None)  # type: ignore[arg-type]


def test_build_then_parse_round_trip() -> None:
    url = append_query_parameters("https://client.example/", {"a": ["1", "2"], "b": []})
    assert parse_query(url.query.decode()) == {"a": ["1", "2"], "b": [""]}

    values = {"redirect_uri": ["https://client.example/cb?x=1&y=2"], "scope": ["openid email"]}
    url = append_query_parameters("https://server.example/authorize?client_id=app", values)
    assert parse_query(url.query.decode()) == {"client_id": ["app"], **values}


# --- Module Notes -----------------------------------------------------------
# `httpx.URL.query` is the raw (still escaped) query as bytes.

"""
oidc_toolkit.cli.app

Command routing for the `oidc-toolkit` command line.

Responsibilities:
- `parse-query`: print a parsed query string as JSON.
- `append-query`: print a URL with parameters appended.
- `merge-principals`: merge claim payloads (JSON files) into one principal.

This is the only module that reads files or writes to stdout; everything it calls is pure.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from oidc_toolkit import __version__
from oidc_toolkit.auth.claims import principal_from_claims
from oidc_toolkit.auth.merge import merge_principals
from oidc_toolkit.auth.models import Principal
from oidc_toolkit.errors import OidcToolkitError
from oidc_toolkit.observability.logging import configure_logging, get_logger
from oidc_toolkit.settings import Settings, get_settings
from oidc_toolkit.urls.query import append_query_parameters, parse_query

log = get_logger(__name__)

SUCCESS = 0
USAGE_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oidc-toolkit",
        description="Query string and claims helpers for OAuth/OpenID Connect flows.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default=None, help="Overrides OIDC_TOOLKIT_LOG_LEVEL.")

    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse-query", help="Parse a query string into JSON.")
    parse_cmd.add_argument("query", help="Query string, with or without the leading '?'.")

    append_cmd = commands.add_parser("append-query", help="Append parameters to a URL.")
    append_cmd.add_argument("url")
    append_cmd.add_argument(
        "parameters",
        nargs="+",
        metavar="NAME[=VALUE]",
        help="Repeat a name to send several values; omit '=VALUE' for a flag.",
    )

    merge_cmd = commands.add_parser(
        "merge-principals", help="Merge JSON claim payloads into one principal."
    )
    merge_cmd.add_argument("files", nargs="+", metavar="FILE", help="JSON payload file, '-' for stdin.")

    return parser


def _handle_parse_query(args: argparse.Namespace) -> int:
    print(json.dumps(parse_query(args.query)))
    return SUCCESS


def _handle_append_query(args: argparse.Namespace) -> int:
    parameters: dict[str, list[str]] = {}
    for item in args.parameters:
        name, sep, value = item.partition("=")
        values = parameters.setdefault(name, [])
        if sep:
            values.append(value)

    print(append_query_parameters(args.url, parameters))
    return SUCCESS


def _handle_merge_principals(args: argparse.Namespace, settings: Settings) -> int:
    principals: list[Principal | None] = []
    for source in args.files:
        payload = _load_json(source)
        # A "null" document stands for a source that yielded no principal.
        if payload is None:
            principals.append(None)
            continue
        principals.append(
            principal_from_claims(
                payload,
                issuer=settings.claims_issuer,
                authentication_type=settings.default_authentication_type,
            )
        )

    merged = merge_principals(*principals, authentication_type=settings.default_authentication_type)
    identity = merged.identity
    print(
        json.dumps(
            {
                "authenticated": merged.is_authenticated,
                "authentication_type": identity.authentication_type if identity else None,
                "claims": [
                    {"type": c.type, "value": c.value, "value_type": c.value_type}
                    for c in merged.claims
                ],
            },
            indent=2,
        )
    )
    return SUCCESS


def _load_json(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(service_name=settings.service_name, level=args.log_level or settings.log_level)
    log.debug("command", command=args.command)

    try:
        if args.command == "parse-query":
            return _handle_parse_query(args)
        if args.command == "append-query":
            return _handle_append_query(args)
        return _handle_merge_principals(args, settings)
    # ValueError covers JSON and UTF-8 decoding failures.
    except (OidcToolkitError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return USAGE_ERROR


def cli() -> None:
    sys.exit(main())


# --- Module Notes -----------------------------------------------------------
# `main` takes explicit argv/settings so tests can drive it in-process.

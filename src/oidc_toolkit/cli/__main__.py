"""
oidc_toolkit.cli.__main__

Entrypoint for running the command line via `python -m oidc_toolkit.cli`.
"""

from __future__ import annotations

from oidc_toolkit.cli.app import cli

if __name__ == "__main__":
    cli()

"""
oidc_toolkit.cli

Command line front-end for the toolkit.

Responsibilities:
- Parse arguments and dispatch to the pure library functions.
- Act as the error boundary (exit codes, stderr messages).
"""

# Package marker.

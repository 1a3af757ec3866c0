"""Allow ``python -m ghpx`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m ghpx`` behaves identically to the ``ghpx`` console
script.
"""

from __future__ import annotations

from ghpx.cli.app import cli

if __name__ == "__main__":
    cli()

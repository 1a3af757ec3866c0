"""CLI application entry point and command routing for ghpx.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ghpx.exceptions.GhpxError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No dispatch logic lives here — the decision engine and its
  collaborators live in the core and infrastructure layers.
* Self-flags (``--ghpx-*``) are recognised only as the first argument
  and short-circuit before any argument classification.  Everything
  else, ``--help`` and ``--version`` included, belongs to ``npx``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from ghpx.cli import exit_codes
from ghpx.cli.console import configure_logging, console, escape_markup, stdout_console
from ghpx.core.config import CACHE_DIR_NAME, GhpxConfig
from ghpx.core.models import PackageSpecifier
from ghpx.exceptions import GhpxError
from ghpx.version import __version__

HELP_FLAG: str = "--ghpx-help"
VERSION_FLAG: str = "--ghpx-version"
CLEAR_CACHE_FLAG: str = "--ghpx-clear-cache"
DOCTOR_FLAG: str = "--ghpx-doctor"

SELF_FLAGS: frozenset[str] = frozenset(
    {HELP_FLAG, VERSION_FLAG, CLEAR_CACHE_FLAG, DOCTOR_FLAG},
)

_EPILOG = f"""\
Works around npx failing on scoped packages from alternative registries
(like GitHub Package Registry).  Scoped packages are installed into a
private cache and run from there; anything else is passed to npx as-is.

Examples:
  ghpx @myorg/my-cli --help
  ghpx @myorg/my-cli@latest
  ghpx @myorg/my-cli@1.2.3 some-command
  ghpx cowsay hello

Cache location: ~/{CACHE_DIR_NAME}/ (override with GHPX_CACHE_DIR)
"""


# ---------------------------------------------------------------------------
# Argument parser (self-flags only)
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the parser for ghpx's own flags.

    Only the first raw argument is ever parsed, and only when it is one
    of :data:`SELF_FLAGS`; package arguments never reach argparse.
    """
    parser = argparse.ArgumentParser(
        prog="ghpx",
        usage="%(prog)s @scope/package-name[@version] [args...]",
        description=f"ghpx v{__version__} - npx wrapper for GitHub Package Registry",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        HELP_FLAG,
        action="help",
        help="Show this help message and exit.",
    )
    group.add_argument(
        VERSION_FLAG,
        action="version",
        version=f"%(prog)s v{__version__}",
        help="Show the ghpx version and exit.",
    )
    group.add_argument(
        CLEAR_CACHE_FLAG,
        action="store_true",
        help="Delete all cached packages and exit.",
    )
    group.add_argument(
        DOCTOR_FLAG,
        action="store_true",
        help="Check that npm and npx are available and show the cache location.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _announce_install(specifier: PackageSpecifier) -> None:
    console.print(f"[bold cyan]Installing[/bold cyan] {escape_markup(specifier.raw_token)}...")


def _handle_dispatch(raw: list[str], config: GhpxConfig) -> int:
    """Run the dispatcher with production collaborators.

    Flow:
    1. Classify arguments and pick the package token.
    2. Unscoped / missing token: forward everything to npx.
    3. Scoped: install into the cache when stale, then run the binary.
    """
    from ghpx.core.dispatch_service import DispatchService
    from ghpx.infra.binary_locator import NodeBinaryLocator
    from ghpx.infra.npm_installer import NpmInstaller
    from ghpx.infra.package_cache import FilesystemPackageCache
    from ghpx.infra.process_runner import SubprocessRunner

    runner = SubprocessRunner(windows=config.windows)
    service = DispatchService(
        config,
        runner,
        FilesystemPackageCache(config.cache_root),
        NpmInstaller(runner, config.npm_command),
        NodeBinaryLocator(windows=config.windows),
        on_install=_announce_install,
    )
    return service.dispatch(raw)


def _handle_clear_cache(config: GhpxConfig) -> int:
    """Dispatch the ``--ghpx-clear-cache`` self-flag.

    The status line is the command's result, so it goes to stdout.
    """
    from ghpx.infra.package_cache import FilesystemPackageCache

    cache = FilesystemPackageCache(config.cache_root)
    if cache.clear():
        stdout_console.print(f"[green]Cache cleared:[/green] {escape_markup(cache.root)}")
    else:
        stdout_console.print(f"Cache directory does not exist: {escape_markup(cache.root)}")
    return exit_codes.SUCCESS


def _handle_doctor(config: GhpxConfig) -> int:
    """Dispatch the ``--ghpx-doctor`` self-flag."""
    from ghpx.cli.doctor import run_doctor

    return run_doctor(config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ghpx CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code — the forwarded child's own code when a
        child ran.
    """
    raw = list(sys.argv[1:] if argv is None else argv)
    config = GhpxConfig.from_environment()
    configure_logging(config.debug)

    if raw and raw[0] in SELF_FLAGS:
        args = _build_parser().parse_args(raw[:1])
        if args.ghpx_clear_cache:
            return _handle_clear_cache(config)
        if args.ghpx_doctor:
            return _handle_doctor(config)

    return _handle_dispatch(raw, config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except GhpxError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

"""``ghpx --ghpx-doctor``: can this machine run scoped packages?

Reports the ghpx and Python versions, whether the configured npm and
npx commands are on PATH, what the package cache currently holds, and
the OS.  npm and npx are both required: without npm nothing scoped can
be installed, without npx nothing else can run.

This module lives in the CLI layer — it may import from ``infra``
and ``core``.  It only collects and renders; it never installs or
spawns anything.
"""

from __future__ import annotations

import platform
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from ghpx.cli import exit_codes
from ghpx.cli.console import console
from ghpx.core.config import GhpxConfig
from ghpx.infra.package_cache import FilesystemPackageCache
from ghpx.infra.tool_detector import ToolStatus, detect_tool
from ghpx.version import __version__

MIN_PYTHON: tuple[int, int] = (3, 10)

_OS_DISPLAY_NAMES: dict[str, str] = {"Darwin": "macOS"}


@dataclass(frozen=True, slots=True)
class DoctorCheck:
    """One row of the doctor report."""

    component: str
    detail: str
    passed: bool = True

    @property
    def status(self) -> str:
        return "OK" if self.passed else "FAIL"


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def check_ghpx() -> DoctorCheck:
    return DoctorCheck("ghpx", __version__)


def check_python(version_info: Sequence[int] | None = None) -> DoctorCheck:
    """Check the running interpreter (or *version_info*) against :data:`MIN_PYTHON`."""
    info = tuple(sys.version_info[:3] if version_info is None else version_info)
    detail = ".".join(str(part) for part in info)
    passed = info[:2] >= MIN_PYTHON
    if not passed:
        detail += f" (>={MIN_PYTHON[0]}.{MIN_PYTHON[1]} required)"
    return DoctorCheck("Python", detail, passed)


def check_tool(status: ToolStatus) -> DoctorCheck:
    if not status.found:
        return DoctorCheck(status.name, "not found", passed=False)
    return DoctorCheck(status.name, str(status.path) if status.path else "found")


def check_cache(config: GhpxConfig) -> DoctorCheck:
    """Show the cache root and how many packages it holds.

    An absent cache is normal (nothing installed yet), so this row never
    fails.
    """
    cache = FilesystemPackageCache(config.cache_root)
    count = len(cache.entries())
    noun = "package" if count == 1 else "packages"
    return DoctorCheck("cache", f"{cache.root} ({count} {noun})")


def check_os() -> DoctorCheck:
    system = platform.system()
    name = _OS_DISPLAY_NAMES.get(system, system)
    return DoctorCheck("OS", f"{name} {platform.release()} ({platform.machine()})")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _render_checks(checks: Sequence[DoctorCheck]) -> None:
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        _render_checks_plain(checks)
        return

    table = Table(title="ghpx doctor", header_style="bold cyan", border_style="dim")
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for check in checks:
        # Text cells: paths and versions are shown verbatim, never as markup.
        table.add_row(
            Text(check.component),
            Text(check.detail),
            Text(check.status, style="green" if check.passed else "red"),
        )

    console.print()
    console.print(table)
    console.print()


def _render_checks_plain(checks: Sequence[DoctorCheck]) -> None:
    value_width = max(32, *(len(check.detail) for check in checks))
    rule = "-" * (12 + 1 + value_width + 1 + 6)
    lines = ["", "ghpx doctor", rule]
    lines.append(f"{'Component':<12} {'Value':<{value_width}} Status")
    lines.append(rule)
    lines.extend(
        f"{check.component:<12} {check.detail:<{value_width}} {check.status}"
        for check in checks
    )
    lines.append("")
    print("\n".join(lines), file=sys.stderr)


def _report_outcome(failed: bool, install_commands: Sequence[str]) -> None:
    if install_commands:
        console.print("Node.js tooling is missing.", style="yellow")
        console.print("Install using one of the following commands:")
        for command in install_commands:
            console.print(f"  {command}", style="bold")
        console.print()

    if failed:
        console.print("Some checks failed.", style="bold red")
    else:
        console.print("All checks passed.", style="bold green")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def collect_checks(config: GhpxConfig, tools: Sequence[ToolStatus]) -> list[DoctorCheck]:
    return [
        check_ghpx(),
        check_python(),
        *(check_tool(status) for status in tools),
        check_cache(config),
        check_os(),
    ]


def run_doctor(config: GhpxConfig) -> int:
    """Run every check, render the report and return the exit code.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when every check passed,
        :data:`exit_codes.GENERAL_ERROR` otherwise (npm or npx missing,
        or an unsupported Python).
    """
    tools = [detect_tool(config.npm_command), detect_tool(config.npx_command)]
    checks = collect_checks(config, tools)
    failed = not all(check.passed for check in checks)

    _render_checks(checks)
    missing = next((status for status in tools if not status.found), None)
    _report_outcome(failed, missing.install_commands if missing is not None else ())

    return exit_codes.GENERAL_ERROR if failed else exit_codes.SUCCESS

"""CLI console and logging helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--ghpx-help``, ``--ghpx-version``,
plain passthrough) remain functional even when Rich is not installed.

Values that come from the user or the filesystem (specifier tokens,
cache paths, error messages) must go through :func:`escape_markup`
before being interpolated into a markup string.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from ghpx.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def escape_markup(value: object) -> str:
	"""Return ``str(value)`` with Rich markup brackets escaped.

	The plain fallback prints text verbatim, so without Rich the string
	is returned unchanged.
	"""
	text = str(value)
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = True) -> None:
		self._stderr = stderr

	def print(self, *objects: object, style: str | None = None) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, style=style)


console = _ConsoleProxy()
"""Diagnostics, progress notes and errors (stderr)."""

stdout_console = _ConsoleProxy(stderr=False)
"""Results of ghpx's own commands (stdout)."""


def configure_logging(debug: bool) -> None:
	"""Route ``ghpx`` diagnostic logs to stderr when *debug* is set.

	Uses ``rich.logging.RichHandler`` when Rich is importable.  Without
	*debug* the ``ghpx`` loggers stay silent.
	"""
	if not debug:
		return

	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
	else:
		handler = RichHandler(console=get_rich_console(), show_path=False)

	logger = logging.getLogger("ghpx")
	logger.handlers[:] = [handler]
	logger.setLevel(logging.DEBUG)

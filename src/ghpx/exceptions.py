"""Custom exception hierarchy for ghpx.

All exceptions that cross layer boundaries must inherit from
:class:`GhpxError`.  Raw ``OSError`` instances raised by the operating
system (spawn failures, unwritable cache directories) must NEVER
propagate beyond the infrastructure layer — they are caught there and
re-raised as a typed subclass defined here.

Classification outcomes (no package token, unscoped package) are not
errors and have no exception type: they route to ``npx`` passthrough.

Hierarchy
---------
GhpxError
├── InstallFailedError
├── BinaryNotFoundError
├── SpawnFailedError
├── CacheError
└── EnvironmentError
"""

from __future__ import annotations


class GhpxError(Exception):
    """Base exception for all ghpx errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Install -----------------------------------------------------------------

class InstallFailedError(GhpxError):
    """Raised when ``npm install`` fails for a scoped specifier."""


# --- Resolution --------------------------------------------------------------

class BinaryNotFoundError(GhpxError):
    """Raised when the installed package exposes no matching executable."""


# --- Process -----------------------------------------------------------------

class SpawnFailedError(GhpxError):
    """Raised when a child process cannot be started at all."""


# --- Cache -------------------------------------------------------------------

class CacheError(GhpxError):
    """Raised when the cache root cannot be cleared."""


# --- Environment / tooling ---------------------------------------------------

class EnvironmentError(GhpxError):
    """Raised when a required runtime dependency is not available."""


def append_clear_cache_suggestion(hint: str) -> str:
    """Append cache-reset guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "If the cached install looks broken, reset it:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    ghpx --ghpx-clear-cache",
        )
    )

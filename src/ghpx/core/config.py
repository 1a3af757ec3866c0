"""Runtime configuration for ghpx.

The cache root and external command names are resolved once, by the
CLI, and passed explicitly into every component that needs them.  No
other module reads the environment.

Environment variables
---------------------
``GHPX_CACHE_DIR``
    Cache root (default ``~/.ghpx-cache``).
``GHPX_NPM`` / ``GHPX_NPX``
    Package manager and passthrough commands (default ``npm`` / ``npx``).
``GHPX_DEBUG``
    Enable diagnostic logging (``1``, ``true``, ``yes`` or ``on``).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

CACHE_DIR_NAME: str = ".ghpx-cache"

_TRUTHY: frozenset[str] = frozenset({"1", "true", "yes", "on"})


def default_cache_root(home: Path | None = None) -> Path:
    """Return ``~/.ghpx-cache`` for *home* (defaults to the user's home)."""
    base = home if home is not None else Path.home()
    return base / CACHE_DIR_NAME


@dataclass(frozen=True, slots=True)
class GhpxConfig:
    """Explicit configuration consumed by the dispatcher and its collaborators."""

    cache_root: Path
    npm_command: str = "npm"
    npx_command: str = "npx"
    windows: bool = False
    debug: bool = False

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        home: Path | None = None,
    ) -> GhpxConfig:
        """Build a config from *environ* (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ

        override = env.get("GHPX_CACHE_DIR", "").strip()
        if override:
            cache_root = Path(override).expanduser()
        else:
            cache_root = default_cache_root(home)

        return cls(
            cache_root=cache_root.absolute(),
            npm_command=env.get("GHPX_NPM", "").strip() or "npm",
            npx_command=env.get("GHPX_NPX", "").strip() or "npx",
            windows=sys.platform == "win32",
            debug=env.get("GHPX_DEBUG", "").strip().lower() in _TRUTHY,
        )

"""Infrastructure: find a package executable inside a cache entry.

npm links every installed executable into ``node_modules/.bin``.  On
Windows the runnable entry point is the ``.cmd`` wrapper next to the
POSIX shell script of the same name.
"""

from __future__ import annotations

import sys
from pathlib import Path

from ghpx.core.models import CacheEntry

WINDOWS_WRAPPER_SUFFIX: str = ".cmd"


class NodeBinaryLocator:
    """Concrete :class:`BinaryLocator` over ``node_modules/.bin``.

    This class satisfies the :class:`~ghpx.core.protocols.BinaryLocator`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, *, windows: bool | None = None) -> None:
        self._windows: bool = sys.platform == "win32" if windows is None else windows

    def candidates(self, entry: CacheEntry, name: str) -> tuple[Path, ...]:
        """Return the paths probed for *name*, in preference order."""
        plain = entry.bin_dir / name
        if self._windows:
            return (entry.bin_dir / f"{name}{WINDOWS_WRAPPER_SUFFIX}", plain)
        return (plain,)

    def locate(self, entry: CacheEntry, name: str) -> Path | None:
        """Return the first existing candidate as an absolute path, or ``None``."""
        for candidate in self.candidates(entry, name):
            if candidate.exists():
                return candidate.absolute()
        return None

"""Infrastructure: the on-disk package cache.

Layout::

    <cache_root>/
        <scope>/
            <base_name>/
                package.json
                node_modules/
                    .bin/

Rules
-----
* No locking — concurrent installs of one entry are unguarded.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ghpx.core.cache_layout import locate_cache_entry
from ghpx.core.models import CacheEntry
from ghpx.exceptions import CacheError

logger = logging.getLogger(__name__)

LATEST_TAG: str = "@latest"


class FilesystemPackageCache:
    """Concrete :class:`PackageCache` over a single cache root directory.

    This class satisfies the :class:`~ghpx.core.protocols.PackageCache`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, cache_root: Path) -> None:
        self._root: Path = Path(cache_root)

    @property
    def root(self) -> Path:
        return self._root

    # ------------------------------------------------------------------
    # Freshness
    # ------------------------------------------------------------------

    def must_install(self, entry: CacheEntry, token: str) -> bool:
        """Return ``True`` when *entry* needs an ``npm install`` for *token*.

        Rules, in order:

        1. No ``node_modules`` in the entry — install.
        2. *token* contains ``@latest`` anywhere — install, since the cache
           cannot know whether a newer release exists.
        3. Otherwise the cached install is reused.
        """
        if not entry.dependency_dir.is_dir():
            return True
        return LATEST_TAG in token

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def entries(self) -> list[CacheEntry]:
        """List cached entries, sorted by scope then name."""
        if not self._root.is_dir():
            return []
        found: list[CacheEntry] = []
        for scope_dir in sorted(p for p in self._root.iterdir() if p.is_dir()):
            for package_dir in sorted(p for p in scope_dir.iterdir() if p.is_dir()):
                found.append(
                    locate_cache_entry(self._root, scope_dir.name, package_dir.name),
                )
        return found

    # ------------------------------------------------------------------
    # Clearing
    # ------------------------------------------------------------------

    def clear(self) -> bool:
        """Remove the whole cache root.

        Returns ``False`` when there was nothing to remove.

        Raises
        ------
        CacheError
            When the directory exists but cannot be removed.
        """
        if not self._root.exists():
            return False
        try:
            shutil.rmtree(self._root)
        except OSError as exc:
            raise CacheError(
                f"Could not clear cache {self._root}: {exc.strerror or exc}",
                hint="Check permissions, or remove the directory manually.",
            ) from exc
        logger.debug("removed cache root %s", self._root)
        return True

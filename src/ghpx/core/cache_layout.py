"""Deterministic cache layout: ``<cache_root>/<scope>/<base_name>``.

Path arithmetic only — nothing here touches the filesystem.
"""

from __future__ import annotations

import re
from pathlib import Path

from ghpx.core.models import CacheEntry, PackageSpecifier

_QUALIFIER_RE: re.Pattern[str] = re.compile(r"@.*$")


def strip_version_qualifier(name: str) -> str:
    """Drop a trailing ``@version`` / ``@tag`` from *name*."""
    return _QUALIFIER_RE.sub("", name)


def locate_cache_entry(cache_root: Path, scope: str, base_name: str) -> CacheEntry:
    """Map ``(scope, base_name)`` to its :class:`CacheEntry`.

    Every version of a package shares one entry, so *base_name* loses any
    version qualifier before it becomes a path component.
    """
    bare_name = strip_version_qualifier(base_name)
    return CacheEntry(
        scope=scope,
        base_name=bare_name,
        path=Path(cache_root) / scope / bare_name,
    )


def cache_entry_for(cache_root: Path, specifier: PackageSpecifier) -> CacheEntry:
    """Convenience wrapper over :func:`locate_cache_entry` for a parsed specifier."""
    return locate_cache_entry(cache_root, specifier.scope, specifier.base_name)

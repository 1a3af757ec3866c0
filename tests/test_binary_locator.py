"""Tests for binary resolution (infra/binary_locator.py)."""

from __future__ import annotations

from pathlib import Path

from ghpx.core.cache_layout import locate_cache_entry
from ghpx.core.models import CacheEntry
from ghpx.infra.binary_locator import NodeBinaryLocator


def _entry_with(cache_root: Path, *names: str) -> CacheEntry:
    entry = locate_cache_entry(cache_root, "acme", "tool")
    entry.bin_dir.mkdir(parents=True)
    for name in names:
        (entry.bin_dir / name).write_text("", encoding="utf-8")
    return entry


class TestPosix:
    def test_found(self, cache_root: Path) -> None:
        entry = _entry_with(cache_root, "tool")
        path = NodeBinaryLocator(windows=False).locate(entry, "tool")
        assert path == (entry.bin_dir / "tool").absolute()
        assert path is not None and path.is_absolute()

    def test_cmd_wrapper_ignored(self, cache_root: Path) -> None:
        entry = _entry_with(cache_root, "tool.cmd")
        assert NodeBinaryLocator(windows=False).locate(entry, "tool") is None

    def test_missing_bin_dir(self, cache_root: Path) -> None:
        entry = locate_cache_entry(cache_root, "acme", "tool")
        assert NodeBinaryLocator(windows=False).locate(entry, "tool") is None

    def test_other_binary_only(self, cache_root: Path) -> None:
        entry = _entry_with(cache_root, "something-else")
        assert NodeBinaryLocator(windows=False).locate(entry, "tool") is None


class TestWindows:
    def test_prefers_cmd_wrapper(self, cache_root: Path) -> None:
        entry = _entry_with(cache_root, "tool", "tool.cmd")
        path = NodeBinaryLocator(windows=True).locate(entry, "tool")
        assert path is not None
        assert path.name == "tool.cmd"

    def test_falls_back_to_plain(self, cache_root: Path) -> None:
        entry = _entry_with(cache_root, "tool")
        path = NodeBinaryLocator(windows=True).locate(entry, "tool")
        assert path is not None
        assert path.name == "tool"

    def test_candidate_order(self, cache_root: Path) -> None:
        entry = locate_cache_entry(cache_root, "acme", "tool")
        assert NodeBinaryLocator(windows=True).candidates(entry, "tool") == (
            entry.bin_dir / "tool.cmd",
            entry.bin_dir / "tool",
        )

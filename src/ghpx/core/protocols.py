"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so tests can substitute fakes for subprocesses and
the filesystem.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from ghpx.core.models import CacheEntry


class ProcessRunner(Protocol):
    """Contract for spawning one child process and waiting for it."""

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        inherit_streams: bool = True,
    ) -> int:
        """Run *command* to completion and return its exit code.

        Parameters
        ----------
        command:
            Executable followed by its arguments.
        cwd:
            Working directory for the child, or ``None`` for the current one.
        inherit_streams:
            When ``True`` the child shares this process's stdin, stdout
            and stderr; otherwise its output is discarded.

        Returns
        -------
        int
            The child's exit code, or ``0`` when it reports none.

        Raises
        ------
        SpawnFailedError
            When the child cannot be started.
        """
        ...  # pragma: no cover


class PackageCache(Protocol):
    """Contract for the freshness check on a cache entry."""

    def must_install(self, entry: CacheEntry, token: str) -> bool:
        """Return ``True`` when *entry* must be (re)installed for *token*."""
        ...  # pragma: no cover


class PackageInstaller(Protocol):
    """Contract for materialising a package into a cache entry."""

    def install(
        self,
        entry: CacheEntry,
        token: str,
        flags: Sequence[str] = (),
    ) -> None:
        """Install *token* into *entry*.

        Raises
        ------
        InstallFailedError
            When the package manager fails.
        SpawnFailedError
            When the package manager cannot be started.
        """
        ...  # pragma: no cover


class BinaryLocator(Protocol):
    """Contract for finding a package executable inside a cache entry."""

    def locate(self, entry: CacheEntry, name: str) -> Path | None:
        """Return the executable called *name*, or ``None``."""
        ...  # pragma: no cover

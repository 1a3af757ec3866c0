"""npm-backed implementation of :class:`~ghpx.core.protocols.PackageInstaller`.

The installer turns a cache entry into a throwaway npm project and runs
``npm install <specifier>`` inside it.  Network access, dependency
resolution and registry authentication (``.npmrc``) are entirely npm's
business.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from ghpx.core.models import CacheEntry
from ghpx.core.protocols import ProcessRunner
from ghpx.exceptions import InstallFailedError, append_clear_cache_suggestion

# Private and unpublishable; only gives npm a valid install root.
MANIFEST: dict[str, object] = {
    "name": "ghpx-temp",
    "version": "1.0.0",
    "private": True,
}


class NpmInstaller:
    """Concrete :class:`PackageInstaller` that shells out to ``npm install``.

    Usage::

        installer = NpmInstaller(SubprocessRunner())
        installer.install(entry, "@acme/tool@1.2.3")

    The child inherits this process's standard streams so that progress
    output and registry-auth prompts reach the user.  A failed install is
    not cleaned up; the entry stays as npm left it.
    """

    def __init__(self, runner: ProcessRunner, npm_command: str = "npm") -> None:
        self._runner: ProcessRunner = runner
        self._npm: str = npm_command

    def build_command(self, token: str, flags: Sequence[str] = ()) -> list[str]:
        """Return the ``npm install`` argv for *token*."""
        return [self._npm, "install", *flags, token]

    def write_manifest(self, entry: CacheEntry) -> None:
        """Create *entry* and write its synthetic ``package.json``.

        Raises
        ------
        InstallFailedError
            When the directory or manifest cannot be written.
        """
        try:
            entry.path.mkdir(parents=True, exist_ok=True)
            entry.manifest_path.write_text(
                json.dumps(MANIFEST, indent=2),
                encoding="utf-8",
            )
        except OSError as exc:
            raise InstallFailedError(
                f"Could not prepare cache directory {entry.path}: {exc.strerror or exc}",
                hint="Check permissions on the cache directory or set GHPX_CACHE_DIR.",
            ) from exc

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

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
            When npm exits non-zero or the manifest cannot be written.
        SpawnFailedError
            When npm itself cannot be started.
        """
        self.write_manifest(entry)
        code = self._runner.run(self.build_command(token, flags), cwd=entry.path)
        if code != 0:
            raise InstallFailedError(
                f"Error installing {token} (npm exited with code {code}).",
                hint=append_clear_cache_suggestion(
                    "Check the package name and your registry authentication (.npmrc).",
                ),
            )

"""Core dispatch service — runs a decision to completion.

This service depends on collaborators injected at construction time
(a process runner, a package cache, an installer and a binary locator),
keeping the core free of subprocess and filesystem imports.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct filesystem access.
* Only :class:`~ghpx.exceptions.GhpxError` subclasses escape.
* At most one child process runs at a time: install, then the binary.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ghpx.core.cache_layout import cache_entry_for
from ghpx.core.config import GhpxConfig
from ghpx.core.dispatch import decide
from ghpx.core.models import DispatchDecision, PackageSpecifier, Route
from ghpx.core.protocols import BinaryLocator, PackageCache, PackageInstaller, ProcessRunner
from ghpx.exceptions import BinaryNotFoundError, append_clear_cache_suggestion

logger = logging.getLogger(__name__)


class DispatchService:
    """Executes dispatch decisions for one process-wide configuration.

    Parameters
    ----------
    config:
        Resolved configuration (cache root, command names).
    runner:
        Spawns ``npx`` and resolved binaries.
    cache:
        Answers whether a cache entry must be (re)installed.
    installer:
        Installs a specifier into a cache entry.
    locator:
        Finds the executable inside an installed cache entry.
    on_install:
        Optional callable invoked with the specifier right before an
        install starts.  May be ``None``.
    """

    def __init__(
        self,
        config: GhpxConfig,
        runner: ProcessRunner,
        cache: PackageCache,
        installer: PackageInstaller,
        locator: BinaryLocator,
        *,
        on_install: Callable[[PackageSpecifier], None] | None = None,
    ) -> None:
        self._config: GhpxConfig = config
        self._runner: ProcessRunner = runner
        self._cache: PackageCache = cache
        self._installer: PackageInstaller = installer
        self._locator: BinaryLocator = locator
        self._on_install = on_install

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(self, raw: Sequence[str]) -> int:
        """Handle the raw invocation *raw* and return the exit code.

        Raises
        ------
        InstallFailedError
            When ``npm install`` fails.
        BinaryNotFoundError
            When the installed package has no executable of its name.
        SpawnFailedError
            When ``npx``, ``npm`` or the binary cannot be started.
        """
        decision = decide(raw)
        logger.debug("dispatch %s: %s", decision.route.value, decision.reason)

        if decision.route is Route.PASSTHROUGH or decision.specifier is None:
            return self.passthrough(decision.forwarded_args)
        return self._run_scoped(decision.specifier, decision)

    def passthrough(self, args: Sequence[str]) -> int:
        """Forward *args* unmodified to ``npx``."""
        return self._runner.run([self._config.npx_command, *args])

    # ------------------------------------------------------------------
    # Scoped path
    # ------------------------------------------------------------------

    def _run_scoped(
        self,
        specifier: PackageSpecifier,
        decision: DispatchDecision,
    ) -> int:
        entry = cache_entry_for(self._config.cache_root, specifier)
        if self._cache.must_install(entry, specifier.raw_token):
            logger.debug("installing %s into %s", specifier.raw_token, entry.path)
            if self._on_install is not None:
                self._on_install(specifier)
            self._installer.install(entry, specifier.raw_token, decision.install_flags)
        else:
            logger.debug("reusing cache entry %s", entry.path)

        binary = self._locator.locate(entry, specifier.base_name)
        if binary is None:
            raise BinaryNotFoundError(
                f"Binary '{specifier.base_name}' not found in {specifier.package_name}.",
                hint=append_clear_cache_suggestion(f"Looked in: {entry.bin_dir}"),
            )

        logger.debug("running %s with %d argument(s)", binary, len(decision.forwarded_args))
        return self._runner.run([str(binary), *decision.forwarded_args])

"""Subprocess-backed implementation of :class:`~ghpx.core.protocols.ProcessRunner`.

This module is the **only** place in the codebase that spawns child
processes.  ``OSError`` raised while starting a child is caught here and
re-raised as :class:`~ghpx.exceptions.SpawnFailedError` — nothing raw
escapes the infrastructure boundary.

Rules
-----
* No timeouts — the child runs until it exits.
* No custom signal handling.
* No shell, except what Windows needs to start ``.cmd`` shims.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from ghpx.exceptions import SpawnFailedError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Concrete :class:`ProcessRunner` backed by :func:`subprocess.run`.

    This class satisfies the :class:`~ghpx.core.protocols.ProcessRunner`
    protocol structurally — no explicit inheritance required.

    Parameters
    ----------
    windows:
        Resolve commands through ``PATH``/``PATHEXT`` before spawning, so
        ``npm`` finds ``npm.cmd``.  Defaults to the current platform.
    """

    def __init__(self, *, windows: bool | None = None) -> None:
        self._windows: bool = sys.platform == "win32" if windows is None else windows

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        inherit_streams: bool = True,
    ) -> int:
        """Run *command* and block until it exits.

        Returns
        -------
        int
            The child's exit code.  A child killed by a signal reports no
            exit code, which maps to ``0``.

        Raises
        ------
        SpawnFailedError
            When the executable is missing or cannot be invoked.
        """
        if not command:
            raise SpawnFailedError("No command given.")

        argv = [self._resolve(command[0]), *command[1:]]
        stream = None if inherit_streams else subprocess.DEVNULL
        logger.debug("spawn %s (cwd=%s)", argv, cwd)

        try:
            completed = subprocess.run(  # noqa: S603
                argv,
                cwd=cwd,
                stdout=stream,
                stderr=stream,
                check=False,
            )
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise SpawnFailedError(
                f"Error executing {command[0]}: {reason}",
                hint="Make sure the command is installed and on your PATH.",
            ) from exc

        returncode = completed.returncode
        if returncode < 0:
            logger.debug("%s terminated by signal %d", command[0], -returncode)
            return 0
        return returncode

    # ------------------------------------------------------------------
    # Executable resolution
    # ------------------------------------------------------------------

    def _resolve(self, executable: str) -> str:
        """Return *executable* as ``CreateProcess`` can start it.

        POSIX spawns the name as-is; Windows needs the ``.cmd`` shim that
        ``shutil.which`` finds via ``PATHEXT``.
        """
        if not self._windows:
            return executable
        resolved = shutil.which(executable)
        if resolved is None:
            raise SpawnFailedError(
                f"Error executing {executable}: not found on PATH",
                hint="Make sure the command is installed and on your PATH.",
            )
        return resolved

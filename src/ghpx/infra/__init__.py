"""Infrastructure layer — external system integration.

This layer wraps all interaction with npm, child processes, the cache
directory and the system PATH.  Every raw ``OSError`` must be caught
here and re-raised as a :class:`~ghpx.exceptions.GhpxError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from ghpx.infra.binary_locator import NodeBinaryLocator
from ghpx.infra.npm_installer import NpmInstaller
from ghpx.infra.package_cache import FilesystemPackageCache
from ghpx.infra.process_runner import SubprocessRunner
from ghpx.infra.tool_detector import ToolStatus, detect_tool

__all__: list[str] = [
    "FilesystemPackageCache",
    "NodeBinaryLocator",
    "NpmInstaller",
    "SubprocessRunner",
    "ToolStatus",
    "detect_tool",
]

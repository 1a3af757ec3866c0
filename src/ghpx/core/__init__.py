"""Core / service layer — pure dispatch logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or subprocess I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from ghpx.core.config import GhpxConfig
from ghpx.core.dispatch import decide
from ghpx.core.dispatch_service import DispatchService
from ghpx.core.models import (
    CacheEntry,
    CandidateSpecifier,
    ClassifiedArguments,
    DispatchDecision,
    PackageSpecifier,
    Route,
)
from ghpx.core.protocols import BinaryLocator, PackageCache, PackageInstaller, ProcessRunner

__all__: list[str] = [
    "BinaryLocator",
    "CacheEntry",
    "CandidateSpecifier",
    "ClassifiedArguments",
    "DispatchDecision",
    "DispatchService",
    "GhpxConfig",
    "PackageCache",
    "PackageInstaller",
    "PackageSpecifier",
    "ProcessRunner",
    "Route",
    "decide",
]

"""Domain models for ghpx.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivial derived paths.  They carry zero
I/O and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Argument classification
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ClassifiedArguments:
    """Raw arguments split into ``npx`` flags and everything else.

    Every raw argument lands in exactly one of the two tuples, and the
    relative order inside each tuple matches the raw invocation.
    """

    tool_flags: tuple[str, ...]
    """Flags recognised as belonging to ``npx``, including flag values."""

    remaining: tuple[str, ...]
    """All other arguments, order preserved."""


@dataclass(frozen=True, slots=True)
class CandidateSpecifier:
    """The first non-flag token of :attr:`ClassifiedArguments.remaining`."""

    token: str
    index: int
    """Position of :attr:`token` within ``remaining``."""


# ---------------------------------------------------------------------------
# Package specifier
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PackageSpecifier:
    """A parsed ``@scope/name[@version-or-tag]`` token."""

    scope: str
    """Scope without the leading ``@`` (e.g. ``acme``)."""

    base_name: str
    """Package name inside the scope, without any version qualifier."""

    version_qualifier: str | None
    """``@``-prefixed version or tag (e.g. ``@1.2.3``, ``@latest``), or ``None``."""

    raw_token: str
    """The original token, passed verbatim to ``npm install``."""

    @property
    def package_name(self) -> str:
        """Fully scoped name without qualifier (``@acme/tool``)."""
        return f"@{self.scope}/{self.base_name}"


# ---------------------------------------------------------------------------
# Cache entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CacheEntry:
    """On-disk install location for one ``(scope, base_name)`` pair.

    Only the most recent install's contents exist at any time; there is
    no version history.
    """

    scope: str
    base_name: str
    path: Path

    @property
    def manifest_path(self) -> Path:
        return self.path / "package.json"

    @property
    def dependency_dir(self) -> Path:
        return self.path / "node_modules"

    @property
    def bin_dir(self) -> Path:
        return self.dependency_dir / ".bin"


# ---------------------------------------------------------------------------
# Dispatch decision
# ---------------------------------------------------------------------------

class Route(enum.Enum):
    """Where an invocation ends up."""

    PASSTHROUGH = "passthrough"
    SCOPED = "scoped"


@dataclass(frozen=True, slots=True)
class DispatchDecision:
    """Pure outcome of the dispatch decision engine.

    For :attr:`Route.PASSTHROUGH`, :attr:`forwarded_args` is the complete
    raw invocation.  For :attr:`Route.SCOPED`, it is the slice of
    ``remaining`` after the specifier token, and :attr:`specifier` is set.
    """

    route: Route
    forwarded_args: tuple[str, ...]
    reason: str
    specifier: PackageSpecifier | None = None
    install_flags: tuple[str, ...] = ()

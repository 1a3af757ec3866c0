"""Flag vocabularies recognised by the argument classifier.

The tables are plain data so the recognised set can be tested and
extended without touching the classification logic.

* ``NPX_FLAGS`` — the ``npx`` options that are split away from the
  package token and its arguments.
* ``INSTALL_FLAGS`` — the subset of those options that also matter to
  ``npm install`` (verbosity, registry selection, network mode).
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass


class FlagKind(enum.Enum):
    """How a single token relates to a :class:`FlagTable`."""

    WITH_VALUE = "with_value"
    """Flag consumes the next token as its value (``--registry URL``)."""

    STANDALONE = "standalone"
    """Flag stands alone (``--yes``)."""

    INLINE = "inline"
    """Flag carries its value after ``=`` (``--registry=URL``)."""

    NOT_A_FLAG = "not_a_flag"


@dataclass(frozen=True, slots=True)
class FlagTable:
    """Closed set of recognised flag tokens."""

    with_value: frozenset[str]
    standalone: frozenset[str]
    inline_prefixes: tuple[str, ...]

    def kind_of(self, token: str) -> FlagKind:
        """Classify *token* against this table.

        Exact matches win over inline prefixes, so ``--package`` is a
        value-taking flag while ``--package=x`` is an inline one.
        """
        if token in self.with_value:
            return FlagKind.WITH_VALUE
        if token in self.standalone:
            return FlagKind.STANDALONE
        if token.startswith(self.inline_prefixes):
            return FlagKind.INLINE
        return FlagKind.NOT_A_FLAG

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.kind_of(token) is not FlagKind.NOT_A_FLAG


def _inline(*names: str) -> tuple[str, ...]:
    return tuple(f"{name}=" for name in names if name.startswith("--"))


# ---------------------------------------------------------------------------
# npx
# ---------------------------------------------------------------------------

_NPX_VALUE_FLAGS: tuple[str, ...] = (
    "-p",
    "--package",
    "-c",
    "--call",
    "-w",
    "--workspace",
    "--registry",
    "--userconfig",
    "--cache",
    "--loglevel",
    "--node-options",
)

_NPX_STANDALONE_FLAGS: tuple[str, ...] = (
    "-y",
    "--yes",
    "--no",
    "--no-install",
    "--ignore-existing",
    "-q",
    "--quiet",
    "--silent",
    "-d",
    "--verbose",
    "-ws",
    "--workspaces",
    "--include-workspace-root",
    "--prefer-online",
    "--prefer-offline",
    "--offline",
)

NPX_FLAGS = FlagTable(
    with_value=frozenset(_NPX_VALUE_FLAGS),
    standalone=frozenset(_NPX_STANDALONE_FLAGS),
    inline_prefixes=_inline(*_NPX_VALUE_FLAGS),
)


# ---------------------------------------------------------------------------
# npm install
# ---------------------------------------------------------------------------

_INSTALL_VALUE_FLAGS: tuple[str, ...] = (
    "--registry",
    "--userconfig",
    "--loglevel",
)

INSTALL_FLAGS = FlagTable(
    with_value=frozenset(_INSTALL_VALUE_FLAGS),
    standalone=frozenset(
        (
            "-q",
            "--quiet",
            "--silent",
            "-d",
            "--verbose",
            "--prefer-online",
            "--prefer-offline",
            "--offline",
        )
    ),
    inline_prefixes=_inline(*_INSTALL_VALUE_FLAGS),
)


def select_flags(
    tool_flags: Sequence[str],
    source: FlagTable,
    wanted: FlagTable,
) -> tuple[str, ...]:
    """Return the flags of *tool_flags* that *wanted* recognises.

    *tool_flags* must come from classification against *source*, so every
    value-taking flag is directly followed by its value (except possibly
    the last one).  Flag/value pairs are kept or dropped together.
    """
    selected: list[str] = []
    index = 0
    while index < len(tool_flags):
        token = tool_flags[index]
        width = 1
        if source.kind_of(token) is FlagKind.WITH_VALUE and index + 1 < len(tool_flags):
            width = 2
        if token in wanted:
            selected.extend(tool_flags[index:index + width])
        index += width
    return tuple(selected)

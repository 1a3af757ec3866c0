"""Pure argument classification.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

1. **Classify** — split raw arguments into ``npx`` flags and the rest.
2. **Select** — pick the first non-flag token as the candidate package.
"""

from __future__ import annotations

from collections.abc import Sequence

from ghpx.core.flags import FlagKind, FlagTable
from ghpx.core.models import CandidateSpecifier, ClassifiedArguments

FLAG_PREFIX: str = "-"


# ---------------------------------------------------------------------------
# 1. Classify
# ---------------------------------------------------------------------------

def classify_arguments(
    raw: Sequence[str],
    flags: FlagTable,
) -> ClassifiedArguments:
    """Split *raw* into tool flags and remaining arguments.

    A value-taking flag swallows the next token whatever it looks like.
    When such a flag is the last token it is recorded on its own.
    """
    tool_flags: list[str] = []
    remaining: list[str] = []

    index = 0
    while index < len(raw):
        token = raw[index]
        kind = flags.kind_of(token)
        if kind is FlagKind.WITH_VALUE:
            tool_flags.append(token)
            if index + 1 < len(raw):
                tool_flags.append(raw[index + 1])
                index += 1
        elif kind is FlagKind.NOT_A_FLAG:
            remaining.append(token)
        else:
            tool_flags.append(token)
        index += 1

    return ClassifiedArguments(
        tool_flags=tuple(tool_flags),
        remaining=tuple(remaining),
    )


# ---------------------------------------------------------------------------
# 2. Select
# ---------------------------------------------------------------------------

def find_candidate(remaining: Sequence[str]) -> CandidateSpecifier | None:
    """Return the first token not starting with ``-``, or ``None``."""
    for index, token in enumerate(remaining):
        if not token.startswith(FLAG_PREFIX):
            return CandidateSpecifier(token=token, index=index)
    return None

"""Pure dispatch decision engine.

:func:`decide` walks the classification states and returns a
:class:`~ghpx.core.models.DispatchDecision` without any side effects::

    Start -> ClassifyArgs -> NoCandidate      -> Passthrough
                          -> SpecifierFound -> NotScoped -> Passthrough
                                            -> Scoped    -> (cache, install, run)

The effectful half (cache, install, run) lives in
:class:`~ghpx.core.dispatch_service.DispatchService`.
"""

from __future__ import annotations

from collections.abc import Sequence

from ghpx.core.arguments import classify_arguments, find_candidate
from ghpx.core.flags import INSTALL_FLAGS, NPX_FLAGS, FlagTable, select_flags
from ghpx.core.models import DispatchDecision, Route
from ghpx.core.specifier import parse_specifier

REASON_EMPTY: str = "no arguments"
REASON_NO_CANDIDATE: str = "no package token"
REASON_NOT_SCOPED: str = "package is not scoped"
REASON_SCOPED: str = "scoped package"


def _passthrough(raw: tuple[str, ...], reason: str) -> DispatchDecision:
    return DispatchDecision(
        route=Route.PASSTHROUGH,
        forwarded_args=raw,
        reason=reason,
    )


def decide(
    raw: Sequence[str],
    flags: FlagTable = NPX_FLAGS,
    install_flags: FlagTable = INSTALL_FLAGS,
) -> DispatchDecision:
    """Decide how to handle the raw invocation *raw*.

    Passthrough decisions always forward *raw* exactly as given.  Scoped
    decisions forward only the arguments after the package token.
    """
    invocation = tuple(raw)
    if not invocation:
        return _passthrough(invocation, REASON_EMPTY)

    classified = classify_arguments(invocation, flags)
    candidate = find_candidate(classified.remaining)
    if candidate is None:
        return _passthrough(invocation, REASON_NO_CANDIDATE)

    specifier = parse_specifier(candidate.token)
    if specifier is None:
        return _passthrough(invocation, REASON_NOT_SCOPED)

    return DispatchDecision(
        route=Route.SCOPED,
        forwarded_args=classified.remaining[candidate.index + 1:],
        reason=REASON_SCOPED,
        specifier=specifier,
        install_flags=select_flags(classified.tool_flags, flags, install_flags),
    )

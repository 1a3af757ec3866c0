"""Scoped package specifier parsing."""

from __future__ import annotations

import re

from ghpx.core.models import PackageSpecifier

# @scope/name[@version-or-tag], matched whole; no whitespace anywhere
_SCOPED_RE: re.Pattern[str] = re.compile(r"@([^/\s]+)/([^@/\s]+)(@\S+)?")


def parse_specifier(token: str) -> PackageSpecifier | None:
    """Parse *token* as a scoped package specifier.

    Returns ``None`` for unscoped names (``cowsay``) and malformed scoped
    tokens (``@acme``, ``@acme/``).  That is a normal outcome which routes
    the invocation to ``npx``, not an error.
    """
    match = _SCOPED_RE.fullmatch(token)
    if match is None:
        return None
    scope, base_name, qualifier = match.groups()
    return PackageSpecifier(
        scope=scope,
        base_name=base_name,
        version_qualifier=qualifier,
        raw_token=token,
    )

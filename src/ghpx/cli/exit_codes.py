"""Exit codes ghpx produces on its own behalf.

When a child process (npx or a cached package binary) runs, its exit
code is returned verbatim instead; these values only cover paths where
ghpx itself decides how the process ends.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Self-flag handled, or nothing went wrong before a child took over."""

GENERAL_ERROR: int = 1
"""Install, spawn, cache or lookup failure; the message was shown on stderr."""

KEYBOARD_INTERRUPT: int = 130
"""Ctrl+C while ghpx was in control (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""A bug: an exception that is not a GhpxError reached the boundary."""

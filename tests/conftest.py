"""Shared pytest fixtures and configuration for the ghpx test suite.

Guidelines
----------
* No internet access in any test.
* npm / npx are never spawned — a recording fake runner stands in.
* Every cache lives under ``tmp_path``; the user's real cache is never touched.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

import pytest

from ghpx.core.config import GhpxConfig


@dataclass(frozen=True)
class RecordedCall:
    """One :meth:`FakeRunner.run` invocation."""

    command: tuple[str, ...]
    cwd: Path | None
    inherit_streams: bool


class FakeRunner:
    """Recording stand-in for :class:`~ghpx.infra.process_runner.SubprocessRunner`.

    Parameters
    ----------
    results:
        Exit code per executable basename (``npm``, ``npx``, ``tool``).
        Unlisted executables exit with ``0``.
    installs:
        Executable names to link into ``node_modules/.bin`` whenever an
        ``npm install`` call succeeds, mimicking npm.
    """

    def __init__(
        self,
        results: dict[str, int] | None = None,
        installs: Iterable[str] = (),
    ) -> None:
        self.results: dict[str, int] = dict(results or {})
        self.installs: tuple[str, ...] = tuple(installs)
        self.calls: list[RecordedCall] = []

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        inherit_streams: bool = True,
    ) -> int:
        call = RecordedCall(tuple(command), cwd, inherit_streams)
        self.calls.append(call)
        code = self.results.get(Path(command[0]).name, 0)
        if code == 0 and len(command) > 1 and command[1] == "install" and cwd is not None:
            bin_dir = cwd / "node_modules" / ".bin"
            bin_dir.mkdir(parents=True, exist_ok=True)
            for name in self.installs:
                (bin_dir / name).write_text("#!/bin/sh\n", encoding="utf-8")
        return code

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [call.command for call in self.calls]


@pytest.fixture()
def cache_root(tmp_path: Path) -> Path:
    return tmp_path / "ghpx-cache"


@pytest.fixture()
def config(cache_root: Path) -> GhpxConfig:
    return GhpxConfig(cache_root=cache_root, windows=False)


@pytest.fixture()
def make_runner() -> Callable[..., FakeRunner]:
    """Factory fixture: ``make_runner(results={...}, installs=[...])``."""
    return FakeRunner


@pytest.fixture()
def ghpx_env(monkeypatch: pytest.MonkeyPatch, cache_root: Path) -> Path:
    """Point the CLI at a temporary cache and neutralise other overrides."""
    monkeypatch.setenv("GHPX_CACHE_DIR", str(cache_root))
    monkeypatch.delenv("GHPX_NPM", raising=False)
    monkeypatch.delenv("GHPX_NPX", raising=False)
    monkeypatch.delenv("GHPX_DEBUG", raising=False)
    return cache_root

"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from ghpx import __version__
from ghpx.cli import exit_codes
from ghpx.cli.app import main
from ghpx.exceptions import (
    BinaryNotFoundError,
    CacheError,
    EnvironmentError,
    GhpxError,
    InstallFailedError,
    SpawnFailedError,
    append_clear_cache_suggestion,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InstallFailedError,
            BinaryNotFoundError,
            SpawnFailedError,
            CacheError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[GhpxError]
    ) -> None:
        assert issubclass(exc_class, GhpxError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(GhpxError, Exception)

    def test_hint_is_stored(self) -> None:
        err = GhpxError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = GhpxError("boom")
        assert err.hint is None


class TestClearCacheSuggestion:
    def test_appends_command(self) -> None:
        hint = append_clear_cache_suggestion("Looked in: /x")
        assert hint.startswith("Looked in: /x")
        assert "ghpx --ghpx-clear-cache" in hint

    def test_appended_only_once(self) -> None:
        once = append_clear_cache_suggestion("base")
        assert append_clear_cache_suggestion(once) == once


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_version_flag(self, ghpx_env: object) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--ghpx-version"])
        assert exc_info.value.code == 0

    def test_help_flag(self, ghpx_env: object) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--ghpx-help"])
        assert exc_info.value.code == 0

    @patch("ghpx.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, _mock_doc: object, ghpx_env: object) -> None:
        code = main(["--ghpx-doctor"])
        assert code == exit_codes.SUCCESS

    def test_package_routes_to_dispatch(
        self, monkeypatch: pytest.MonkeyPatch, ghpx_env: object,
    ) -> None:
        from ghpx.cli import app as app_module

        seen: list[list[str]] = []
        monkeypatch.setattr(
            app_module,
            "_handle_dispatch",
            lambda raw, config: seen.append(raw) or exit_codes.SUCCESS,
        )
        code = main(["@acme/tool", "--flag"])
        assert code == exit_codes.SUCCESS
        assert seen == [["@acme/tool", "--flag"]]

    def test_self_flag_only_recognised_first(
        self, monkeypatch: pytest.MonkeyPatch, ghpx_env: object,
    ) -> None:
        from ghpx.cli import app as app_module

        seen: list[list[str]] = []
        monkeypatch.setattr(
            app_module,
            "_handle_dispatch",
            lambda raw, config: seen.append(raw) or exit_codes.SUCCESS,
        )
        main(["cowsay", "--ghpx-version"])
        assert seen == [["cowsay", "--ghpx-version"]]

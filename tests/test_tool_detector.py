"""Tests for npm / npx detection (infra/tool_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from ghpx.infra.tool_detector import (
    ToolStatus,
    _platform_install_commands,
    detect_tool,
)


# ---------------------------------------------------------------------------
# detect_tool
# ---------------------------------------------------------------------------

class TestDetectTool:
    @patch("ghpx.infra.tool_detector.shutil.which")
    def test_found(self, mock_which: object) -> None:
        mock_which.return_value = "/usr/bin/npm"  # type: ignore[union-attr]
        status = detect_tool("npm")

        assert status.name == "npm"
        assert status.found is True
        assert status.path is not None
        assert "found at" in status.version_hint
        assert status.install_commands == ()

    @patch("ghpx.infra.tool_detector.shutil.which")
    def test_not_found(self, mock_which: object) -> None:
        mock_which.return_value = None  # type: ignore[union-attr]
        status = detect_tool("npx")

        assert status.name == "npx"
        assert status.found is False
        assert status.path is None
        assert status.version_hint == "not found"
        assert len(status.install_commands) > 0

    @patch("ghpx.infra.tool_detector.shutil.which")
    def test_found_returns_path(self, mock_which: object) -> None:
        mock_which.return_value = "/usr/local/bin/npx"  # type: ignore[union-attr]
        status = detect_tool("npx")
        assert isinstance(status.path, Path)


# ---------------------------------------------------------------------------
# Platform install commands
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @patch("ghpx.infra.tool_detector.platform.system", return_value="Windows")
    def test_windows_commands(self, _mock_sys: object) -> None:
        cmds = _platform_install_commands()
        assert "winget install OpenJS.NodeJS.LTS" in cmds

    @patch("ghpx.infra.tool_detector.platform.system", return_value="Linux")
    def test_linux_commands(self, _mock_sys: object) -> None:
        cmds = _platform_install_commands()
        assert any("apt" in c for c in cmds)
        assert any("dnf" in c for c in cmds)

    @patch("ghpx.infra.tool_detector.platform.system", return_value="Darwin")
    def test_darwin_commands(self, _mock_sys: object) -> None:
        assert _platform_install_commands() == ("brew install node",)

    @patch("ghpx.infra.tool_detector.platform.system", return_value="Plan9")
    def test_unknown_platform(self, _mock_sys: object) -> None:
        cmds = _platform_install_commands()
        assert len(cmds) == 1
        assert "nodejs.org" in cmds[0]


# ---------------------------------------------------------------------------
# ToolStatus dataclass
# ---------------------------------------------------------------------------

class TestToolStatus:
    def test_frozen(self) -> None:
        status = ToolStatus(
            name="npm",
            found=True,
            path=Path("/usr/bin/npm"),
            version_hint="found",
            install_commands=(),
        )
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]

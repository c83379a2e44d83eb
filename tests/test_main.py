"""
Tests for process bootstrap and packaging metadata.
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import main


def test_main_logs_startup_then_runs_stdio(caplog: pytest.LogCaptureFixture) -> None:
    server = MagicMock()
    with patch("main.load_dotenv"), patch("main.create_server", return_value=server):
        with caplog.at_level(logging.INFO):
            main.main()

    assert "Favicon.so MCP Server starting on stdio" in caplog.text
    assert "running" not in caplog.text
    server.run.assert_called_once_with(transport="stdio")


def test_main_exits_nonzero_on_startup_failure(caplog: pytest.LogCaptureFixture) -> None:
    server = MagicMock()
    server.run.side_effect = RuntimeError("stdio unavailable")
    with patch("main.load_dotenv"), patch("main.create_server", return_value=server):
        with caplog.at_level(logging.INFO), pytest.raises(SystemExit) as exc_info:
            main.main()

    assert exc_info.value.code == 1
    assert "Fatal error in main(): stdio unavailable" in caplog.text


def test_package_metadata_has_no_readme_pointer() -> None:
    tomllib = pytest.importorskip("tomllib")
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    project = tomllib.loads(pyproject.read_text())["project"]

    assert project["name"] == "favicon-so-mcp"
    assert "readme" not in project

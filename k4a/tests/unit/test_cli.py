"""Unit tests for the k4a command line."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from k4a import __version__
from k4a.cli import app
from k4a.constants.defaults import CONFIG_ENV_VAR

runner = CliRunner()

CONFIG_TEXT = """kafkactl:
  current-context: dev
  contexts:
    - name: dev
      context:
        api: https://dev.example.com
        namespace: team-a
"""


@pytest.fixture
def config_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(CONFIG_TEXT)
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path


class TestCli:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"k4a version {__version__}" in result.output

    def test_missing_config_exits_with_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))
        with patch("k4a.cli.K4aApp") as tui:
            result = runner.invoke(app, [])
        assert result.exit_code == 1
        tui.assert_not_called()

    def test_runs_app(self, config_env: Path, tmp_path: Path) -> None:
        with (
            patch("k4a.cli.DiskCache") as disk_cache,
            patch("k4a.cli.K4aApp") as tui,
        ):
            tui.return_value.return_code = 0
            result = runner.invoke(app, [])
        assert result.exit_code == 0
        disk_cache.assert_called_once_with()
        tui.return_value.run.assert_called_once_with()
        contexts = tui.call_args.args[1]
        assert contexts.current_context_name == "dev"

    def test_app_failure_exits_with_error(self, config_env: Path) -> None:
        with (
            patch("k4a.cli.DiskCache"),
            patch("k4a.cli.K4aApp") as tui,
        ):
            tui.return_value.run.side_effect = RuntimeError("boom")
            result = runner.invoke(app, [])
        assert result.exit_code == 1

    def test_debug_flag_opens_and_closes_log(self, config_env: Path) -> None:
        debug_log = MagicMock()
        with (
            patch("k4a.cli.DebugLog", return_value=debug_log) as debug_log_class,
            patch("k4a.cli.DiskCache"),
            patch("k4a.cli.K4aApp") as tui,
        ):
            tui.return_value.return_code = 0
            result = runner.invoke(app, ["--debug"])
        assert result.exit_code == 0
        debug_log_class.assert_called_once_with(enabled=True)
        debug_log.open.assert_called_once_with()
        debug_log.close.assert_called_once_with()

"""
Unit tests for the CLI entry point.
"""

import logging
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from ocd_installer.cli.app import app, setup_logging
from ocd_installer.config import Config
from ocd_installer.tui import InstallerError


def test_help(cli_runner: CliRunner) -> None:
    """Test --help flag."""
    result = cli_runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "OpenChamber Desktop" in result.stdout


def test_graceful_quit_exits_zero(cli_runner: CliRunner, mock_installer_home: Path) -> None:
    with patch("ocd_installer.tui.run_installer", return_value=0) as run:
        result = cli_runner.invoke(app, [])
    assert result.exit_code == 0
    run.assert_called_once()


def test_ui_failure_exits_one(cli_runner: CliRunner, mock_installer_home: Path) -> None:
    with patch(
        "ocd_installer.tui.run_installer",
        side_effect=InstallerError("no terminal"),
    ):
        result = cli_runner.invoke(app, [])
    assert result.exit_code == 1
    assert "no terminal" in result.output


def test_bad_config_exits_one(cli_runner: CliRunner, mock_installer_home: Path) -> None:
    (mock_installer_home / "config.yaml").write_text("timing: [", encoding="utf-8")
    with patch("ocd_installer.tui.run_installer") as run:
        result = cli_runner.invoke(app, [])
    assert result.exit_code == 1
    run.assert_not_called()


def test_unknown_flag_is_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code != 0


def test_debug_logging_writes_to_file(temp_dir: Path) -> None:
    log_file = temp_dir / "logs" / "installer.log"
    config = Config.model_validate({"logging": {"debug": True, "file": str(log_file)}})

    setup_logging(config)
    try:
        logging.getLogger("ocd_installer.test").debug("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")
    finally:
        setup_logging(Config())


def test_debug_log_location_is_announced(
    cli_runner: CliRunner, mock_installer_home: Path, monkeypatch
) -> None:
    monkeypatch.setenv("OCD_INSTALLER_LOGGING_DEBUG", "true")
    try:
        with patch("ocd_installer.tui.run_installer", return_value=0):
            result = cli_runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Debug log:" in result.output
        assert (mock_installer_home / "ocd-installer.log").exists()
    finally:
        setup_logging(Config())


def test_no_log_announcement_without_debug(
    cli_runner: CliRunner, mock_installer_home: Path
) -> None:
    with patch("ocd_installer.tui.run_installer", return_value=0):
        result = cli_runner.invoke(app, [])
    assert "Debug log:" not in result.output

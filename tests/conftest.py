"""
Pytest configuration and fixtures for ocd-installer tests.
"""

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ocd_installer.config import Config
from ocd_installer.wizard import StepController
from ocd_installer.wizard.events import Command, ScheduleEvent


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_installer_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point OCD_INSTALLER_HOME at an empty temporary directory."""
    home = temp_dir / ".ocd-installer"
    home.mkdir()
    monkeypatch.setenv("OCD_INSTALLER_HOME", str(home))
    return home


@pytest.fixture
def controller() -> StepController:
    """Provide a controller in its initial state with default config."""
    return StepController(config=Config())


@pytest.fixture
def fire_scheduled() -> Callable[[StepController, list[Command]], list[Command]]:
    """Deliver scheduled events synchronously instead of waiting on timers.

    Follows the chain of ScheduleEvent commands until none is left and
    returns every command produced along the way.
    """

    def fire(controller: StepController, commands: list[Command]) -> list[Command]:
        produced: list[Command] = []
        pending = list(commands)
        while pending:
            command = pending.pop(0)
            produced.append(command)
            if isinstance(command, ScheduleEvent):
                pending.extend(controller.handle(command.event))
        return produced

    return fire

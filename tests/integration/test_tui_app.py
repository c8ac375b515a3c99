"""
Integration tests driving the Textual app with a pilot.
"""

from datetime import date

import pytest

from ocd_installer.config import Config
from ocd_installer.system.info import SystemInfo
from ocd_installer.tui.app import InstallerApp
from ocd_installer.wizard.steps import Step

FAST_CONFIG = Config.model_validate(
    {"timing": {"tick_interval": 0.01, "check_delay": 0.01}}
)


def fake_system_info() -> SystemInfo:
    return SystemInfo(
        os="linux", arch="x86_64", package_manager="bun", python_version="3.12.0",
        today=date(2026, 1, 1),
    )


async def wait_for_step(pilot, app: InstallerApp, step: Step, timeout: float = 5.0) -> None:
    waited = 0.0
    while app.wizard_state.step != step:
        assert waited < timeout, f"still on {app.wizard_state.step}, expected {step}"
        await pilot.pause(0.05)
        waited += 0.05


@pytest.fixture
def app() -> InstallerApp:
    return InstallerApp(config=FAST_CONFIG, system_info_provider=fake_system_info)


@pytest.mark.asyncio
async def test_viewport_recorded_on_mount(app):
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.pause()
        assert app.wizard_state.viewport == (100, 40)
        assert app.wizard_state.step == Step.MENU


@pytest.mark.asyncio
async def test_install_round_trip(app):
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("enter")
        assert app.wizard_state.step == Step.CHOOSE_PACKAGE_MANAGER

        await pilot.press("down", "down", "down", "enter")
        assert app.wizard_state.package_manager == 3

        await wait_for_step(pilot, app, Step.CHOOSE_ALIASES)
        assert app.wizard_state.aliases.indices() == [0, 1]

        await pilot.press("space", "enter", "enter")
        assert app.wizard_state.aliases.indices() == [1]
        assert app.wizard_state.step == Step.CONFIRM_INSTALL

        await pilot.press("enter")
        await wait_for_step(pilot, app, Step.INSTALL_DONE)
        assert app.wizard_state.progress_fraction == 1.0

        await pilot.press("enter")
        assert app.wizard_state.step == Step.MENU
        assert app.wizard_state.cursor == 0


@pytest.mark.asyncio
async def test_uninstall_requires_yes(app):
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("down", "enter")
        assert app.wizard_state.step == Step.CONFIRM_UNINSTALL_TEXT

        await pilot.press("n", "o", "enter")
        assert app.wizard_state.step == Step.CONFIRM_UNINSTALL_TEXT

        await pilot.press("backspace", "backspace", "y", "e", "s", "enter")
        assert app.wizard_state.step == Step.CHOOSE_UNINSTALL_OPTIONS

        await pilot.press("enter")
        await wait_for_step(pilot, app, Step.UNINSTALL_DONE)


@pytest.mark.asyncio
async def test_system_info_screen(app):
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("down", "down", "enter")
        assert app.wizard_state.step == Step.SYSTEM_INFO
        assert app.system_info is not None
        assert app.system_info.package_manager == "bun"

        await pilot.press("escape")
        assert app.wizard_state.step == Step.MENU
        assert app.wizard_state.cursor == 2


@pytest.mark.asyncio
async def test_exit_choice_quits_with_zero(app):
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("down", "down", "down", "enter")
        await pilot.pause()
    assert app.return_code == 0


@pytest.mark.asyncio
async def test_ctrl_c_quits_from_any_step(app):
    async with app.run_test(size=(100, 40)) as pilot:
        await pilot.press("enter")
        await pilot.press("ctrl+c")
        await pilot.pause()
    assert app.return_code == 0

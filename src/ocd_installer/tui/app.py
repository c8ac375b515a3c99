"""
Main OCD installer TUI application.

Built with Textual. The app is the host event loop of the step controller:
it turns key presses and resizes into wizard events, arms timers for the
events the controller schedules, and re-renders after every event.
"""

import logging
from collections.abc import Callable
from functools import partial

from rich.spinner import Spinner
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from ocd_installer.config.schema import Config
from ocd_installer.system.info import SystemInfo, collect_system_info
from ocd_installer.tui.keys import key_to_event
from ocd_installer.tui.render import THEME_STYLES, render_screen
from ocd_installer.wizard.controller import StepController
from ocd_installer.wizard.events import Command, Event, Quit, Resize, ScheduleEvent, Terminate
from ocd_installer.wizard.state import WizardState
from ocd_installer.wizard.steps import Step

logger = logging.getLogger(__name__)

SPINNER_FPS = 12


class InstallerError(Exception):
    """Raised when the terminal UI cannot start or crashes."""

    pass


class InstallerApp(App):
    """Full-screen installer wizard."""

    CSS = """
    Screen {
        background: $surface;
        overflow-y: auto;
    }

    #wizard {
        width: 100%;
        height: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "wizard_quit", "Quit", show=False, priority=True),
    ]

    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        config: Config | None = None,
        state: WizardState | None = None,
        system_info_provider: Callable[[], SystemInfo] | None = None,
    ):
        """Initialize the installer app.

        Args:
            config: Loaded configuration (defaults when omitted)
            state: Initial wizard state, mainly for tests
            system_info_provider: Probe used by the System Info screen
        """
        super().__init__()
        self.installer_config = config if config is not None else Config()
        self.controller = StepController(state=state, config=self.installer_config)
        self.system_info: SystemInfo | None = None
        self._system_info_provider = system_info_provider or partial(
            collect_system_info, self.installer_config.system.package_managers
        )
        self._spinner = Spinner("dots", style=THEME_STYLES["selected"])

    @property
    def wizard_state(self) -> WizardState:
        return self.controller.state

    def compose(self) -> ComposeResult:
        yield Static(id="wizard")

    def on_mount(self) -> None:
        self.set_interval(1 / SPINNER_FPS, self._animate_spinner)
        self.dispatch_wizard_event(Resize(self.size.width, self.size.height))

    def on_resize(self, event: events.Resize) -> None:
        self.dispatch_wizard_event(Resize(event.size.width, event.size.height))

    def on_key(self, event: events.Key) -> None:
        wizard_event = key_to_event(self.wizard_state.step, event.key, event.character)
        if wizard_event is None:
            return
        event.stop()
        event.prevent_default()
        self.dispatch_wizard_event(wizard_event)

    def action_wizard_quit(self) -> None:
        self.dispatch_wizard_event(Quit())

    def dispatch_wizard_event(self, event: Event) -> None:
        """Feed one event to the controller and carry out its commands."""
        previous = self.wizard_state.step
        commands = self.controller.handle(event)

        if self.wizard_state.step == Step.SYSTEM_INFO and previous != Step.SYSTEM_INFO:
            self.system_info = self._system_info_provider()

        for command in commands:
            self._run_command(command)
        self.refresh_view()

    def _run_command(self, command: Command) -> None:
        if isinstance(command, ScheduleEvent):
            self.set_timer(command.delay, partial(self.dispatch_wizard_event, command.event))
        elif isinstance(command, Terminate):
            logger.debug(f"Exiting with code {command.exit_code}")
            self.exit(return_code=command.exit_code)

    def refresh_view(self) -> None:
        renderable = render_screen(self.wizard_state, self.system_info, self._spinner)
        for body in self.query("#wizard").results(Static):
            body.update(renderable)

    def _animate_spinner(self) -> None:
        if self.wizard_state.step == Step.CHECKING_REQUIREMENTS:
            self.refresh_view()


def run_installer(config: Config | None = None) -> int:
    """Run the installer wizard.

    Returns:
        Exit code of the app (0 on a graceful quit).

    Raises:
        InstallerError: If the terminal UI fails to start or crashes.
    """
    app = InstallerApp(config=config)
    try:
        app.run()
    except Exception as e:
        raise InstallerError(f"Terminal UI failed: {e}") from e

    if app.return_code:
        raise InstallerError(f"Terminal UI exited with code {app.return_code}")
    return 0

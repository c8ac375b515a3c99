"""
Step controller: the wizard's state machine.

Every input event is handled synchronously. Handlers mutate the
WizardState and return commands (timers to arm, process exit) for the host
event loop to carry out. Invalid input is a no-op; nothing here raises.
"""

import logging
from collections.abc import Callable

from ocd_installer.config.schema import Config
from ocd_installer.wizard.events import (
    TEXT_EDIT_EVENTS,
    Back,
    Command,
    Confirm,
    DeleteText,
    Event,
    InsertText,
    MoveTextCursor,
    Navigate,
    Quit,
    RequirementsChecked,
    Resize,
    ScheduleEvent,
    Terminate,
    TextCursorEnd,
    TextCursorHome,
    Tick,
    Toggle,
)
from ocd_installer.wizard.selection import SelectionModel, SelectionSet
from ocd_installer.wizard.state import WizardState
from ocd_installer.wizard.steps import (
    ALIAS_CHOICES,
    MENU_CHOICES,
    PACKAGE_MANAGER_CHOICES,
    SHORTCUT_CHOICES,
    UNINSTALL_CHOICES,
    ChoiceList,
    MenuChoice,
    Step,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Event], list[Command]]


class StepController:
    """Routes input events to the active screen and computes transitions."""

    def __init__(self, state: WizardState | None = None, config: Config | None = None):
        self.config = config if config is not None else Config()
        self.state = state if state is not None else WizardState()
        self.state.confirmation.char_limit = self.config.wizard.text_char_limit
        self.state.progress.interval = self.config.timing.tick_interval

        self._handlers: dict[Step, Handler] = {
            Step.MENU: self._handle_menu,
            Step.CHOOSE_PACKAGE_MANAGER: self._handle_package_manager,
            Step.CHECKING_REQUIREMENTS: self._handle_checking,
            Step.CHOOSE_ALIASES: lambda event: self._handle_checkbox(
                event,
                ALIAS_CHOICES,
                self.state.aliases,
                Step.CHOOSE_SHORTCUTS,
                Step.CHOOSE_PACKAGE_MANAGER,
            ),
            Step.CHOOSE_SHORTCUTS: lambda event: self._handle_checkbox(
                event,
                SHORTCUT_CHOICES,
                self.state.shortcuts,
                Step.CONFIRM_INSTALL,
                Step.CHOOSE_ALIASES,
            ),
            Step.CONFIRM_INSTALL: self._handle_confirm_install,
            Step.INSTALLING: self._handle_progress,
            Step.INSTALL_DONE: self._handle_done,
            Step.CONFIRM_UNINSTALL_TEXT: self._handle_confirm_uninstall,
            Step.CHOOSE_UNINSTALL_OPTIONS: lambda event: self._handle_checkbox(
                event,
                UNINSTALL_CHOICES,
                self.state.uninstall_options,
                Step.UNINSTALLING,
                Step.CONFIRM_UNINSTALL_TEXT,
            ),
            Step.UNINSTALLING: self._handle_progress,
            Step.UNINSTALL_DONE: self._handle_done,
            Step.SYSTEM_INFO: self._handle_system_info,
        }

    @property
    def step(self) -> Step:
        return self.state.step

    def handle(self, event: Event) -> list[Command]:
        """Apply one input event.

        Returns:
            Commands for the host: events to schedule and/or termination.
        """
        if isinstance(event, Quit):
            logger.debug(f"Quit requested on {self.state.step.name}")
            return [Terminate(0)]

        if isinstance(event, Resize):
            self.state.viewport = (max(0, event.width), max(0, event.height))
            return []

        return self._handlers[self.state.step](event)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def _goto(self, step: Step, cursor: int = 0) -> list[Command]:
        logger.debug(f"Step {self.state.step.name} -> {step.name} (cursor={int(cursor)})")
        self.state.step = step
        self.state.cursor = int(cursor)

        if step == Step.CHECKING_REQUIREMENTS:
            return [ScheduleEvent(RequirementsChecked(), self.config.timing.check_delay)]
        if step == Step.INSTALLING:
            return self.state.progress.start(self.config.progress.install_step)
        if step == Step.UNINSTALLING:
            return self.state.progress.start(self.config.progress.uninstall_step)
        return []

    def _navigate(self, choices: ChoiceList, delta: int) -> None:
        model = SelectionModel(choices, cursor=self.state.cursor)
        self.state.cursor = model.move_cursor(delta)

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _handle_menu(self, event: Event) -> list[Command]:
        if isinstance(event, Navigate):
            self._navigate(MENU_CHOICES, event.delta)
            return []

        if not isinstance(event, Confirm):
            return []

        choice = MenuChoice(self.state.cursor)
        if choice == MenuChoice.INSTALL:
            return self._goto(Step.CHOOSE_PACKAGE_MANAGER)
        if choice == MenuChoice.UNINSTALL:
            self.state.confirmation.clear()
            self.state.confirmation.focused = True
            return self._goto(Step.CONFIRM_UNINSTALL_TEXT)
        if choice == MenuChoice.SYSTEM_INFO:
            return self._goto(Step.SYSTEM_INFO)

        logger.debug("Exit selected from menu")
        return [Terminate(0)]

    def _handle_package_manager(self, event: Event) -> list[Command]:
        if isinstance(event, Navigate):
            self._navigate(PACKAGE_MANAGER_CHOICES, event.delta)
        elif isinstance(event, Confirm):
            self.state.package_manager = self.state.cursor
            logger.debug(f"Package manager: {PACKAGE_MANAGER_CHOICES[self.state.cursor]}")
            return self._goto(Step.CHECKING_REQUIREMENTS)
        elif isinstance(event, Back):
            return self._goto(Step.MENU, cursor=MenuChoice.INSTALL)
        return []

    def _handle_checking(self, event: Event) -> list[Command]:
        if isinstance(event, RequirementsChecked):
            return self._goto(Step.CHOOSE_ALIASES)
        return []

    def _handle_checkbox(
        self,
        event: Event,
        choices: ChoiceList,
        selection: SelectionSet,
        next_step: Step,
        prev_step: Step,
    ) -> list[Command]:
        """Shared handler for the multi-select screens."""
        model = SelectionModel(choices, cursor=self.state.cursor, selection=selection)

        if isinstance(event, Navigate):
            self.state.cursor = model.move_cursor(event.delta)
        elif isinstance(event, Toggle):
            model.toggle()
        elif isinstance(event, Confirm):
            return self._goto(next_step)
        elif isinstance(event, Back):
            return self._goto(prev_step)
        return []

    def _handle_confirm_install(self, event: Event) -> list[Command]:
        if isinstance(event, Confirm):
            return self._goto(Step.INSTALLING)
        if isinstance(event, Back):
            return self._goto(Step.CHOOSE_SHORTCUTS)
        return []

    def _handle_progress(self, event: Event) -> list[Command]:
        # User input is locked out while the simulated work runs
        if not isinstance(event, Tick):
            return []

        commands = self.state.progress.advance()
        if self.state.progress.complete:
            done = Step.INSTALL_DONE if self.state.step == Step.INSTALLING else Step.UNINSTALL_DONE
            return self._goto(done)
        return commands

    def _handle_done(self, event: Event) -> list[Command]:
        if isinstance(event, Confirm):
            return self._goto(Step.MENU, cursor=MenuChoice.INSTALL)
        return []

    def _handle_confirm_uninstall(self, event: Event) -> list[Command]:
        confirmation = self.state.confirmation

        if isinstance(event, Confirm):
            if confirmation.matches_confirmation_token():
                confirmation.focused = False
                return self._goto(Step.CHOOSE_UNINSTALL_OPTIONS)
            logger.debug("Uninstall confirmation text did not match")
            return []

        if isinstance(event, Back):
            confirmation.focused = False
            return self._goto(Step.MENU, cursor=MenuChoice.UNINSTALL)

        if isinstance(event, TEXT_EDIT_EVENTS):
            self._edit_text(event)
        return []

    def _edit_text(self, event: Event) -> None:
        confirmation = self.state.confirmation
        if isinstance(event, InsertText):
            confirmation.insert(event.text)
        elif isinstance(event, DeleteText):
            if event.forward:
                confirmation.delete_forward()
            else:
                confirmation.delete_backward()
        elif isinstance(event, MoveTextCursor):
            confirmation.move_cursor(event.delta)
        elif isinstance(event, TextCursorHome):
            confirmation.home()
        elif isinstance(event, TextCursorEnd):
            confirmation.end()

    def _handle_system_info(self, event: Event) -> list[Command]:
        if isinstance(event, (Confirm, Back)):
            return self._goto(Step.MENU, cursor=MenuChoice.SYSTEM_INFO)
        return []

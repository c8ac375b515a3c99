"""
Wizard steps and the fixed choice lists shown on each screen.
"""

from enum import Enum, IntEnum, auto

ChoiceList = tuple[str, ...]


class Step(Enum):
    """Identifier of the active wizard screen."""

    MENU = auto()
    CHOOSE_PACKAGE_MANAGER = auto()
    CHECKING_REQUIREMENTS = auto()
    CHOOSE_ALIASES = auto()
    CHOOSE_SHORTCUTS = auto()
    CONFIRM_INSTALL = auto()
    INSTALLING = auto()
    INSTALL_DONE = auto()
    CONFIRM_UNINSTALL_TEXT = auto()
    CHOOSE_UNINSTALL_OPTIONS = auto()
    UNINSTALLING = auto()
    UNINSTALL_DONE = auto()
    SYSTEM_INFO = auto()


class MenuChoice(IntEnum):
    """Positions of the main menu entries."""

    INSTALL = 0
    UNINSTALL = 1
    SYSTEM_INFO = 2
    EXIT = 3


MENU_CHOICES: ChoiceList = (
    "📦 Install/Update OCD",
    "🗑️  Uninstall",
    "ℹ️  System Info",
    "🚪 Exit",
)
PACKAGE_MANAGER_CHOICES: ChoiceList = ("Bun (Recommended)", "pnpm", "npm", "Auto-detect")
ALIAS_CHOICES: ChoiceList = ("ocd", "openchamber-desktop", "custom")
SHORTCUT_CHOICES: ChoiceList = ("Desktop", "Start Menu", "Dock")
UNINSTALL_CHOICES: ChoiceList = ("Remove OCD", "Remove Core", "Remove Shortcuts")

# Preset selections, by choice index
ALIAS_PRESET = frozenset({0, 1})
SHORTCUT_PRESET = frozenset({0, 1})
UNINSTALL_PRESET = frozenset({0, 2})

_STEP_CHOICES: dict[Step, ChoiceList] = {
    Step.MENU: MENU_CHOICES,
    Step.CHOOSE_PACKAGE_MANAGER: PACKAGE_MANAGER_CHOICES,
    Step.CHOOSE_ALIASES: ALIAS_CHOICES,
    Step.CHOOSE_SHORTCUTS: SHORTCUT_CHOICES,
    Step.CHOOSE_UNINSTALL_OPTIONS: UNINSTALL_CHOICES,
}


def choices_for(step: Step) -> ChoiceList:
    """Return the choice list shown on a step (empty for screens without one)."""
    return _STEP_CHOICES.get(step, ())

"""
Rendering of the wizard state into Rich renderables.

A pure projection: nothing here feeds back into the state machine. All
colors and layout constants live in this module.
"""

from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.progress_bar import ProgressBar
from rich.spinner import Spinner
from rich.text import Text

from ocd_installer.system.info import SystemInfo
from ocd_installer.wizard.progress import ProgressSimulator
from ocd_installer.wizard.selection import SelectionSet
from ocd_installer.wizard.state import WizardState
from ocd_installer.wizard.steps import (
    ALIAS_CHOICES,
    MENU_CHOICES,
    PACKAGE_MANAGER_CHOICES,
    SHORTCUT_CHOICES,
    UNINSTALL_CHOICES,
    ChoiceList,
    Step,
)
from ocd_installer.wizard.text_input import TextConfirmationModel

THEME_STYLES = {
    "title": "bold #00ffff",
    "selected": "#00ffff",
    "success": "#00ff00",
    "faint": "#888888",
    "header": "#ffffff on #333333",
    "input-cursor": "reverse",
}

BANNER = r"""
   ____                   _____ _                     _
  / __ \                 / ____| |                   | |
 | |  | |_ __   ___ _ __| |    | |__   __ _ _ __ ___ | |__   ___ _ __
 | |  | | '_ \ / _ \ '_ \ |    | '_ \ / _' | '_ ' _ \| '_ \ / _ \ '__|
 | |__| | |_) |  __/ | | | |____| | | | (_| | | | | | | |_) |  __/ |
  \____/| .__/ \___|_| |_|\_____|_| |_|\__,_|_| |_| |_|_.__/ \___|_|
        | |
        |_|  INSTALLER V1.0
"""

HELP_LINE = "↑/↓: navigate • enter: select • q: back/quit"
CHECKBOX_HINT = "  (Space: toggle • Enter: continue • Esc: back)"
INITIALIZING = "Initializing OCD Installer..."

# Columns reserved around the progress bar
PROGRESS_MARGIN = 10


def render_choices(title: str, choices: ChoiceList, cursor: int) -> Text:
    """Plain menu list with a ``>`` marker on the cursor row."""
    text = Text(f"{title}\n\n")
    for i, choice in enumerate(choices):
        if i == cursor:
            text.append(f"> {choice}\n", style=THEME_STYLES["selected"])
        else:
            text.append(f"  {choice}\n")
    return text


def render_single_choice(title: str, choices: ChoiceList, cursor: int) -> Text:
    """Radio-style list: the cursor row is the one marked ``[x]``."""
    text = Text(f"{title}\n\n")
    for i, choice in enumerate(choices):
        if i == cursor:
            text.append(f"> [x] {choice}\n", style=THEME_STYLES["selected"])
        else:
            text.append(f"  [ ] {choice}\n")
    return text


def render_checkboxes(
    title: str, choices: ChoiceList, selection: SelectionSet, cursor: int
) -> Text:
    """Multi-select list with ``[x]`` on every selected row."""
    text = Text(f"{title}:\n\n")
    for i, choice in enumerate(choices):
        marker = ">" if i == cursor else " "
        checked = "x" if selection.is_selected(i) else " "
        line = f"{marker} [{checked}] {choice}\n"
        text.append(line, style=THEME_STYLES["selected"] if i == cursor else "")
    text.append(f"\n{CHECKBOX_HINT}")
    return text


def render_text_input(model: TextConfirmationModel) -> Text:
    text = Text("> ")
    if not model.value:
        if model.focused:
            text.append(" ", style=THEME_STYLES["input-cursor"])
        text.append(model.placeholder, style=THEME_STYLES["faint"])
        return text

    text.append(model.value[: model.position])
    if model.focused:
        under_cursor = model.value[model.position : model.position + 1] or " "
        text.append(under_cursor, style=THEME_STYLES["input-cursor"])
        text.append(model.value[model.position + 1 :])
    else:
        text.append(model.value[model.position :])
    return text


def render_progress(label: str, progress: ProgressSimulator, width: int) -> RenderableType:
    bar = ProgressBar(
        total=1.0,
        completed=progress.fraction,
        width=max(PROGRESS_MARGIN, width - PROGRESS_MARGIN),
        complete_style=THEME_STYLES["selected"],
        finished_style=THEME_STYLES["success"],
    )
    return Group(Text(f"\n  {label}\n"), bar, Text(f"{progress.percent}%"))


def render_system_info(info: SystemInfo | None) -> Text:
    text = Text(" SYSTEM INFORMATION ", style=THEME_STYLES["header"])
    text.append("\n\n")
    if info is None:
        text.append("  Collecting system information...\n")
    else:
        text.append(f"  OS:         {info.os}\n")
        text.append(f"  Arch:       {info.arch}\n")
        text.append(f"  Package:    {info.package_manager or 'Auto-detecting...'}\n")
        text.append(f"  Python:     {info.python_version}\n")
        text.append(f"  Date:       {info.today.isoformat()}\n")
    text.append("\n  Press Enter or Esc to return.")
    return text


def render_install_summary(state: WizardState) -> Text:
    plan = state.install_plan()
    text = Text("\n  Ready to install OpenChamber Desktop.\n\n")
    text.append(f"  Package manager: {plan.package_manager}\n")
    text.append(f"  Aliases:         {', '.join(plan.aliases) or 'none'}\n")
    text.append(f"  Shortcuts:       {', '.join(plan.shortcuts) or 'none'}\n")
    text.append("\n  Press Enter to begin installation.")
    return text


def render_uninstall_summary(state: WizardState) -> Text:
    components = state.uninstall_plan()
    return Text(f"\n  Selected: {', '.join(components) or 'none'}", style=THEME_STYLES["faint"])


def render_body(
    state: WizardState,
    system_info: SystemInfo | None = None,
    spinner: Spinner | None = None,
) -> RenderableType:
    """Render the screen body for the active step."""
    step = state.step
    width = state.viewport[0]

    if step == Step.MENU:
        return render_choices("Main Menu:", MENU_CHOICES, state.cursor)
    if step == Step.CHOOSE_PACKAGE_MANAGER:
        return render_single_choice(
            "Step 1: Select Package Manager", PACKAGE_MANAGER_CHOICES, state.cursor
        )
    if step == Step.CHECKING_REQUIREMENTS:
        message = Text(" Checking system for OpenChamber Desktop requirements...")
        if spinner is None:
            return Text("\n  ").append_text(message)
        spinner.text = message
        return Padding(spinner, (1, 0, 0, 2))
    if step == Step.CHOOSE_ALIASES:
        return render_checkboxes(
            "Step 3: Select Aliases", ALIAS_CHOICES, state.aliases, state.cursor
        )
    if step == Step.CHOOSE_SHORTCUTS:
        return render_checkboxes(
            "Step 4: Shortcut Options", SHORTCUT_CHOICES, state.shortcuts, state.cursor
        )
    if step == Step.CONFIRM_INSTALL:
        return render_install_summary(state)
    if step == Step.INSTALLING:
        return render_progress("Installing OCD...", state.progress, width)
    if step == Step.INSTALL_DONE:
        text = Text("\n  ✅ Installation Complete!", style=THEME_STYLES["success"])
        return text.append("\n\n  Press Enter to return to menu.", style="")
    if step == Step.CONFIRM_UNINSTALL_TEXT:
        text = Text(
            "\n  Are you sure you want to uninstall OCD?\n"
            "  This will remove all configuration.\n\n"
            "  Type 'yes' to confirm:\n\n"
        )
        return text.append_text(render_text_input(state.confirmation))
    if step == Step.CHOOSE_UNINSTALL_OPTIONS:
        return render_checkboxes(
            "Step 2: Uninstall Options",
            UNINSTALL_CHOICES,
            state.uninstall_options,
            state.cursor,
        )
    if step == Step.UNINSTALLING:
        return Group(
            render_progress("Removing components...", state.progress, width),
            render_uninstall_summary(state),
        )
    if step == Step.UNINSTALL_DONE:
        text = Text(
            "\n  🗑️  OpenChamber Desktop has been removed.", style=THEME_STYLES["success"]
        )
        return text.append("\n\n  Press Enter to return to menu.", style="")
    if step == Step.SYSTEM_INFO:
        return render_system_info(system_info)

    raise ValueError(f"Unknown step: {step}")


def render_screen(
    state: WizardState,
    system_info: SystemInfo | None = None,
    spinner: Spinner | None = None,
) -> RenderableType:
    """Render the full screen: banner, body and help line."""
    if state.viewport[0] == 0:
        return Text(INITIALIZING)

    return Padding(
        Group(
            Text(BANNER, style=THEME_STYLES["title"]),
            render_body(state, system_info=system_info, spinner=spinner),
            Text(f"\n\n{HELP_LINE}", style=THEME_STYLES["faint"]),
        ),
        (1, 2),
    )

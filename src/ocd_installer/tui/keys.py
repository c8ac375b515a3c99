"""
Translation of terminal key presses into wizard events.
"""

from ocd_installer.wizard.events import (
    Back,
    Confirm,
    DeleteText,
    Event,
    InsertText,
    MoveTextCursor,
    Navigate,
    Quit,
    TextCursorEnd,
    TextCursorHome,
    Toggle,
)
from ocd_installer.wizard.steps import Step

NAVIGATION_KEYS: dict[str, Event] = {
    "up": Navigate(-1),
    "k": Navigate(-1),
    "down": Navigate(1),
    "j": Navigate(1),
    "space": Toggle(),
    "enter": Confirm(),
    "escape": Back(),
}

TEXT_KEYS: dict[str, Event] = {
    "enter": Confirm(),
    "escape": Back(),
    "backspace": DeleteText(),
    "delete": DeleteText(forward=True),
    "left": MoveTextCursor(-1),
    "right": MoveTextCursor(1),
    "home": TextCursorHome(),
    "end": TextCursorEnd(),
}


def key_to_event(step: Step, key: str, character: str | None = None) -> Event | None:
    """Map a key for the active step to an event, or None if it means nothing there.

    Args:
        step: The active wizard step.
        key: Textual key name (``"up"``, ``"enter"``, ``"ctrl+c"``, ...).
        character: The printable character for the key, if any.
    """
    if key == "ctrl+c":
        return Quit()

    if step == Step.CONFIRM_UNINSTALL_TEXT:
        if key in TEXT_KEYS:
            return TEXT_KEYS[key]
        if character and character.isprintable():
            return InsertText(character)
        return None

    if key == "q" and step == Step.MENU:
        return Quit()

    return NAVIGATION_KEYS.get(key)

"""
Events consumed by the step controller and the commands it hands back.

Handlers never touch timers or the terminal: instead they return commands
(``ScheduleEvent``, ``Terminate``) that the hosting event loop carries out.
Tests can execute the commands synchronously.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """Base class for wizard input events."""


@dataclass(frozen=True)
class Navigate(Event):
    delta: int


@dataclass(frozen=True)
class Toggle(Event):
    pass


@dataclass(frozen=True)
class Confirm(Event):
    pass


@dataclass(frozen=True)
class Back(Event):
    pass


@dataclass(frozen=True)
class Quit(Event):
    pass


@dataclass(frozen=True)
class InsertText(Event):
    text: str


@dataclass(frozen=True)
class DeleteText(Event):
    forward: bool = False


@dataclass(frozen=True)
class MoveTextCursor(Event):
    delta: int


@dataclass(frozen=True)
class TextCursorHome(Event):
    pass


@dataclass(frozen=True)
class TextCursorEnd(Event):
    pass


@dataclass(frozen=True)
class Resize(Event):
    width: int
    height: int


@dataclass(frozen=True)
class Tick(Event):
    """A progress interval elapsed."""


@dataclass(frozen=True)
class RequirementsChecked(Event):
    """The simulated requirements check finished."""


TEXT_EDIT_EVENTS = (InsertText, DeleteText, MoveTextCursor, TextCursorHome, TextCursorEnd)


@dataclass(frozen=True)
class Command:
    """Base class for requests made by the controller to its host."""


@dataclass(frozen=True)
class ScheduleEvent(Command):
    """Deliver ``event`` back to the controller after ``delay`` seconds."""

    event: Event
    delay: float


@dataclass(frozen=True)
class Terminate(Command):
    exit_code: int = 0

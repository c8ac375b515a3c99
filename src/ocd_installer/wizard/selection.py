"""
Cursor and multi-select state for list screens.
"""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from ocd_installer.wizard.steps import ChoiceList


class SelectionSet(BaseModel):
    """Indices of the toggled entries of a choice list."""

    selected: set[int] = Field(default_factory=set)

    @classmethod
    def from_preset(cls, preset: Iterable[int]) -> "SelectionSet":
        return cls(selected=set(preset))

    def toggle(self, index: int) -> None:
        """Flip membership of ``index``."""
        if index in self.selected:
            self.selected.discard(index)
        else:
            self.selected.add(index)

    def is_selected(self, index: int) -> bool:
        return index in self.selected

    def indices(self) -> list[int]:
        return sorted(self.selected)

    def labels(self, choices: ChoiceList) -> list[str]:
        """Labels of the selected entries, in list order."""
        return [choices[i] for i in self.indices() if 0 <= i < len(choices)]

    def __contains__(self, index: object) -> bool:
        return index in self.selected


class SelectionModel:
    """A cursor over a choice list, optionally bound to a SelectionSet.

    Single-choice screens have no SelectionSet: the choice is the cursor
    position at the time the screen is confirmed.
    """

    def __init__(
        self,
        choices: ChoiceList,
        cursor: int = 0,
        selection: SelectionSet | None = None,
    ):
        self.choices = choices
        self.selection = selection
        self.cursor = self._clamp(cursor)

    def _clamp(self, position: int) -> int:
        if not self.choices:
            return 0
        return max(0, min(position, len(self.choices) - 1))

    def move_cursor(self, delta: int) -> int:
        """Move the cursor by ``delta``, saturating at both ends."""
        self.cursor = self._clamp(self.cursor + delta)
        return self.cursor

    def toggle(self, index: int | None = None) -> bool:
        """Toggle ``index`` (default: the cursor row).

        Returns:
            True if a SelectionSet was changed.
        """
        if self.selection is None:
            return False
        target = self.cursor if index is None else index
        if not 0 <= target < len(self.choices):
            return False
        self.selection.toggle(target)
        return True

    @property
    def current(self) -> str | None:
        """Label under the cursor."""
        if not self.choices:
            return None
        return self.choices[self.cursor]

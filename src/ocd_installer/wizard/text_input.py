"""
Free-text confirmation box.
"""

from pydantic import BaseModel, Field

CONFIRMATION_TOKEN = "yes"
DEFAULT_CHAR_LIMIT = 10


class TextConfirmationModel(BaseModel):
    """Single-line text buffer with a bounded length and an edit cursor."""

    value: str = ""
    position: int = 0
    char_limit: int = Field(default=DEFAULT_CHAR_LIMIT, ge=1)
    placeholder: str = "type 'yes'"
    focused: bool = False

    def insert(self, text: str) -> None:
        """Insert ``text`` at the cursor, dropping what does not fit."""
        room = self.char_limit - len(self.value)
        if room <= 0 or not text:
            return
        text = text[:room]
        self.value = self.value[: self.position] + text + self.value[self.position :]
        self.position += len(text)

    def delete_backward(self) -> None:
        if self.position == 0:
            return
        self.value = self.value[: self.position - 1] + self.value[self.position :]
        self.position -= 1

    def delete_forward(self) -> None:
        if self.position >= len(self.value):
            return
        self.value = self.value[: self.position] + self.value[self.position + 1 :]

    def move_cursor(self, delta: int) -> None:
        self.position = max(0, min(self.position + delta, len(self.value)))

    def home(self) -> None:
        self.position = 0

    def end(self) -> None:
        self.position = len(self.value)

    def clear(self) -> None:
        self.value = ""
        self.position = 0

    def matches_confirmation_token(self) -> bool:
        """True iff the trimmed, case-folded buffer is exactly ``yes``."""
        return self.value.strip().casefold() == CONFIRMATION_TOKEN

"""CommandBar widget - the ``:`` command and ``/`` filter prompt."""

from __future__ import annotations

from textual.message import Message
from textual.widgets import Input

from k4a.constants.enums import PromptMode
from k4a.constants.limits import COMMAND_CHAR_LIMIT
from k4a.constants.values import (
    COMMAND_PLACEHOLDER,
    COMMAND_PROMPT,
    FILTER_PLACEHOLDER,
    FILTER_PROMPT,
)


class CommandBar(Input):
    """Single-line prompt hidden until opened.

    The buffer is cleared whenever the prompt closes, by submission or by
    cancel, so nothing typed survives to the next opening.
    """

    DEFAULT_CSS = """
    CommandBar {
        height: 3;
        border: round $accent;
    }
    """

    class PromptSubmitted(Message):
        """Posted when the user presses enter in the prompt."""

        def __init__(self, mode: PromptMode, value: str) -> None:
            super().__init__()
            self.mode = mode
            self.value = value

    class PromptCancelled(Message):
        """Posted when the prompt is closed without submitting."""

        def __init__(self, mode: PromptMode) -> None:
            super().__init__()
            self.mode = mode

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(placeholder=COMMAND_PLACEHOLDER, max_length=COMMAND_CHAR_LIMIT, id=id)
        self._mode = PromptMode.COMMAND
        self.display = False

    @property
    def mode(self) -> PromptMode:
        return self._mode

    @property
    def is_open(self) -> bool:
        return bool(self.display)

    def open(self, mode: PromptMode) -> None:
        self._mode = mode
        self.value = ""
        if mode is PromptMode.FILTER:
            self.placeholder = FILTER_PLACEHOLDER
            self.border_title = FILTER_PROMPT
        else:
            self.placeholder = COMMAND_PLACEHOLDER
            self.border_title = COMMAND_PROMPT
        self.display = True
        self.focus()

    def close(self) -> None:
        self.value = ""
        self.display = False

    def cancel(self) -> None:
        if not self.is_open:
            return
        self.close()
        self.post_message(self.PromptCancelled(self._mode))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        value = event.value.strip()
        self.close()
        self.post_message(self.PromptSubmitted(self._mode, value))

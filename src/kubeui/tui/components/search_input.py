"""Single-line editable text buffer used for search entry."""

from __future__ import annotations

from rich.text import Text

from kubeui.tui.engine.events import KeyPress


class TextBuffer:
    """Editable string with a cursor position.

    Args:
        value: Initial text. The cursor starts at the end.
        prompt: Text rendered before the value.
    """

    def __init__(self, value: str = "", prompt: str = "> ") -> None:
        self.value = value
        self.position = len(value)
        self.prompt = prompt

    def insert(self, text: str) -> None:
        self.value = self.value[: self.position] + text + self.value[self.position :]
        self.position += len(text)

    def backspace(self) -> None:
        if self.position == 0:
            return
        self.value = self.value[: self.position - 1] + self.value[self.position :]
        self.position -= 1

    def delete(self) -> None:
        self.value = self.value[: self.position] + self.value[self.position + 1 :]

    def move_left(self) -> None:
        self.position = max(0, self.position - 1)

    def move_right(self) -> None:
        self.position = min(len(self.value), self.position + 1)

    def home(self) -> None:
        self.position = 0

    def end(self) -> None:
        self.position = len(self.value)

    def clear(self) -> None:
        self.value = ""
        self.position = 0

    def handle(self, event: KeyPress) -> bool:
        """Apply a key to the buffer.

        Returns:
            True if the text changed.
        """
        before = self.value
        match event.key:
            case "backspace":
                self.backspace()
            case "delete":
                self.delete()
            case "left":
                self.move_left()
            case "right":
                self.move_right()
            case "home" | "ctrl+a":
                self.home()
            case "end" | "ctrl+e":
                self.end()
            case "ctrl+u":
                self.clear()
            case _ if event.is_printable:
                self.insert(event.character or "")
            case _:
                pass
        return self.value != before

    def render(self, focused: bool, style: str = "") -> Text:
        """Render prompt and value, with a block cursor when focused."""
        text = Text(self.prompt, style=style)
        if not focused:
            text.append(self.value, style=style)
            return text
        text.append(self.value[: self.position], style=style)
        under_cursor = self.value[self.position : self.position + 1] or " "
        text.append(under_cursor, style=f"{style} reverse".strip())
        text.append(self.value[self.position + 1 :], style=style)
        return text

"""Confirmation dialog state machine.

The dialog only moves its cursor and reports which button was pressed.
Closing it and acting on the choice is up to the hosting screen.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Group
from rich.text import Text

from kubeui.tui.engine.events import Event, KeyPress
from kubeui.tui.engine.keys import DEFAULT_DIALOG_KEYS, DialogKeys

if TYPE_CHECKING:
    from kubeui.tui.theme import Theme


@dataclass(frozen=True)
class Button:
    """A dialog button.

    Attributes:
        label: Text shown to the user.
        id: Value reported back when the button is pressed.
    """

    label: str
    id: str


@dataclass(frozen=True)
class ButtonPress:
    button: Button

    @property
    def id(self) -> str:
        return self.button.id


class ConfirmDialog:
    """A prompt with a row of buttons and a clamped cursor.

    Args:
        buttons: Buttons in display order; must not be empty.
        prompt: Question shown above the buttons.
        keys: Key bindings.
    """

    def __init__(
        self,
        buttons: Sequence[Button],
        prompt: str,
        keys: DialogKeys = DEFAULT_DIALOG_KEYS,
    ) -> None:
        if not buttons:
            raise ValueError("a dialog needs at least one button")
        self.buttons = list(buttons)
        self.prompt = prompt
        self.keys = keys
        self.cursor = 0

    @classmethod
    def yes_no(cls, prompt: str, subject: str) -> ConfirmDialog:
        """Yes/No dialog whose buttons both carry ``subject`` as their id."""
        return cls([Button("Yes", subject), Button("No", subject)], prompt)

    @property
    def current(self) -> Button:
        return self.buttons[self.cursor]

    def update(self, event: Event) -> ButtonPress | None:
        match event:
            case KeyPress() if self.keys.left.matches(event):
                self.cursor = max(0, self.cursor - 1)
            case KeyPress() if self.keys.right.matches(event):
                self.cursor = min(len(self.buttons) - 1, self.cursor + 1)
            case KeyPress() if self.keys.confirm.matches(event):
                return ButtonPress(self.current)
            case _:
                pass
        return None

    def render(self, theme: Theme) -> Group:
        buttons = Text()
        for index, button in enumerate(self.buttons):
            if index:
                buttons.append("   ")
            buttons.append(button.label, style=theme.selected if index == self.cursor else "")
        return Group(Text(self.prompt), Text(""), buttons)

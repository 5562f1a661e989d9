"""Screen showing a collaborator failure."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Group
from rich.text import Text

from kubeui.tui.components.help import short_help
from kubeui.tui.engine.events import KeyPress
from kubeui.tui.engine.keys import DEFAULT_GLOBAL_KEYS, GlobalKeys, binding
from kubeui.tui.engine.screen import Command, PopView, Screen

if TYPE_CHECKING:
    from kubeui.tui.engine.events import Event
    from kubeui.tui.engine.keys import KeyBinding
    from kubeui.tui.theme import Theme

GO_BACK = binding("enter", "space", help_keys="enter,space", description="Go back")


class ErrorInfoScreen(Screen):
    """Displays an error message until the user goes back or quits."""

    title = "Error"

    def __init__(self, message: str, keys: GlobalKeys = DEFAULT_GLOBAL_KEYS) -> None:
        self.message = message
        self.keys = keys

    def update(self, event: Event) -> Command | None:
        match event:
            case KeyPress() if GO_BACK.matches(event):
                return PopView()
            case _:
                return None

    def global_bindings(self, keys: GlobalKeys) -> list[KeyBinding]:
        return [keys.help, keys.quit]

    def help_bindings(self) -> list[list[KeyBinding]]:
        return [[GO_BACK]]

    def render(self, theme: Theme) -> Group:
        return Group(
            Text("An error occured", style=f"bold {theme.error}"),
            Text(""),
            Text(self.message),
            Text(""),
            short_help(theme, [GO_BACK, self.keys.quit]),
        )

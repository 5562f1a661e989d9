"""Theme values for rendering screens.

A ``Theme`` is an immutable bundle of Rich style strings. The loop passes
one into every ``render`` call; nothing reads styles from module globals.

Usage:
    from kubeui.tui.theme import DEFAULT_THEME

    text = Text("my-pod", style=DEFAULT_THEME.highlight)
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text


@dataclass(frozen=True)
class Theme:
    """Rich styles used by the views.

    Attributes:
        highlight: Row matching the list's highlighted id (current context, namespace).
        selected: Active button, active page number, focused search field.
        muted: Inactive search field, inactive page numbers, help descriptions.
        accent: Help key names.
        error: Error messages.
        success: Healthy statuses.
        warning: Pending statuses.
        status_bar: The context/namespace status bar.
        tab_active: Selected tab label.
        tab_inactive: Other tab labels.
    """

    highlight: str = "magenta"
    selected: str = "bold #ff5fd7"
    muted: str = "dim"
    accent: str = "cyan"
    error: str = "red"
    success: str = "green"
    warning: str = "yellow"
    status_bar: str = "bold #ff00ff"
    tab_active: str = "bold reverse #5f5fff"
    tab_inactive: str = "#5f5fff"

    def status_style(self, status: str) -> str:
        """Style for a kubectl STATUS value."""
        if status in ("Running", "Completed", "Succeeded"):
            return self.success
        if status in ("Pending", "ContainerCreating", "Terminating") or status.startswith("Init:"):
            return self.warning
        return self.error

    def styled(self, text: str, style: str) -> Text:
        return Text(text, style=style)


DEFAULT_THEME = Theme()

MONOCHROME_THEME = Theme(
    highlight="bold",
    selected="reverse",
    muted="dim",
    accent="bold",
    error="bold",
    success="",
    warning="",
    status_bar="bold",
    tab_active="reverse",
    tab_inactive="",
)

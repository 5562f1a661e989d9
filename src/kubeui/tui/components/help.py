"""Short and full key help rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rich.console import Group
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from kubeui.tui.engine.keys import KeyBinding
    from kubeui.tui.theme import Theme


def short_help(theme: Theme, bindings: Iterable[KeyBinding]) -> Text:
    """One line of "key description" pairs separated by bullets."""
    text = Text()
    for index, key_binding in enumerate(bindings):
        if index:
            text.append(" • ", style=theme.muted)
        text.append(key_binding.help_keys, style=theme.accent)
        text.append(f" {key_binding.description}", style=theme.muted)
    return text


def full_help(theme: Theme, columns: list[list[KeyBinding]], title: str = "") -> Group:
    """Every binding of the active screen, one column per group.

    Empty groups are skipped. ``title`` names the screen in the heading.
    """
    groups = [group for group in columns if group]
    table = Table.grid(padding=(0, 4))
    for _ in groups:
        table.add_column()

    height = max((len(group) for group in groups), default=0)
    for row in range(height):
        cells: list[Text] = []
        for group in groups:
            if row < len(group):
                cell = Text(group[row].help_keys, style=theme.accent)
                cell.append(f" {group[row].description}", style=theme.muted)
                cells.append(cell)
            else:
                cells.append(Text(""))
        table.add_row(*cells)

    return Group(
        Text(f"Help: {title}" if title else "Help", style="bold"),
        Text(""),
        table,
        Text(""),
        Text("Press any key to close", style=theme.muted),
    )

"""Reusable view components: list engine, confirmation dialog, search input and help."""

from kubeui.tui.components.dialog import Button, ButtonPress, ConfirmDialog
from kubeui.tui.components.list_engine import (
    Column,
    Deletion,
    ListEngine,
    ListOptions,
    Mode,
    Row,
    Selection,
)
from kubeui.tui.components.search_input import TextBuffer

__all__ = [
    "Button",
    "ButtonPress",
    "Column",
    "ConfirmDialog",
    "Deletion",
    "ListEngine",
    "ListOptions",
    "Mode",
    "Row",
    "Selection",
    "TextBuffer",
]

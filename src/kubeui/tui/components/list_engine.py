"""Paginated, searchable, selectable list.

``ListEngine`` is the state machine behind every data-browsing screen. It
owns the rows, the search filter, pagination and the cursor, and reports
what the user picked through ``Selection``/``Deletion`` signals. It never
removes rows on its own; the hosting screen calls ``update_rows`` once a
deletion has actually happened.

Invariants after every call:

- ``filtered_rows`` holds the rows whose id contains the search text
  (case-sensitive), in original order.
- ``num_pages == ceil(len(filtered_rows) / page_size)``, or 0 when
  ``page_size`` is 0.
- ``page_rows`` is the current page of ``filtered_rows`` and
  ``0 <= cursor < max(1, len(page_rows))``.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from rich.console import Group
from rich.text import Text

from kubeui.tui.components.search_input import TextBuffer
from kubeui.tui.engine.events import Event, KeyPress
from kubeui.tui.engine.keys import DEFAULT_LIST_KEYS, KeyBinding, ListKeys, binding

if TYPE_CHECKING:
    from kubeui.tui.theme import Theme


class Mode(Enum):
    SELECT = "select"
    SEARCH = "search"


@dataclass(frozen=True)
class Column:
    label: str
    width: int = 0


@dataclass(frozen=True)
class Row:
    """A list entry. ``id`` drives filtering, selection and highlighting."""

    id: str
    values: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, id: str, *values: str) -> Row:
        return cls(id=id, values=values or (id,))


@dataclass(frozen=True)
class ListOptions:
    """Optional behaviour.

    Attributes:
        singular_item_name: Used in help text ("Select a pod").
        start_in_search_mode: Focus the search field when the list is created.
    """

    singular_item_name: str = ""
    start_in_search_mode: bool = False


@dataclass(frozen=True)
class Selection:
    id: str


@dataclass(frozen=True)
class Deletion:
    id: str


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return math.ceil(total / page_size)


def calc_slice(length: int, page: int, page_size: int) -> tuple[int, int]:
    """Start and end index of ``page`` within a sequence of ``length`` items.

    Returns ``(0, 0)`` when the page size is zero or the page starts past the end.
    """
    start = page * page_size
    if page_size <= 0 or page < 0 or start > length:
        return 0, 0
    return start, min(length, start + page_size)


def size_columns(columns: Sequence[Column], rows: Sequence[Row]) -> list[Column]:
    """Widen each column to fit its label and the widest cell in ``rows``."""
    sized = []
    for index, column in enumerate(columns):
        widest = max(
            (len(row.values[index]) for row in rows if index < len(row.values)),
            default=0,
        )
        sized.append(Column(column.label, max(column.width, len(column.label), widest)))
    return sized


class ListEngine:
    """State machine for a paginated, filterable list.

    Args:
        columns: Column labels and widths. Empty for a single unlabelled column.
        rows: Initial rows; ids must be unique.
        page_size: Rows per page. Zero means no pages and no visible rows.
        highlighted_id: Row id rendered with emphasis, independent of the cursor.
        allow_delete: Whether the delete key emits ``Deletion``.
        options: Help text and initial mode.
        keys: Navigation key bindings.
    """

    def __init__(
        self,
        columns: Sequence[Column],
        rows: Sequence[Row],
        page_size: int,
        highlighted_id: str = "",
        allow_delete: bool = False,
        options: ListOptions | None = None,
        keys: ListKeys = DEFAULT_LIST_KEYS,
    ) -> None:
        self.columns = list(columns)
        self.rows = list(rows)
        self.page_size = max(0, page_size)
        self.highlighted_id = highlighted_id
        self.allow_delete = allow_delete
        self.options = options or ListOptions()
        self.keys = keys
        self.search = TextBuffer()
        self.mode = Mode.SEARCH if self.options.start_in_search_mode else Mode.SELECT

        self.current_page = 0
        self.cursor = 0
        self.filtered_rows = list(self.rows)
        self.num_pages = page_count(len(self.filtered_rows), self.page_size)
        self.page_rows: list[Row] = []
        self._recompute()

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def search_text(self) -> str:
        return self.search.value

    @property
    def selected_row(self) -> Row | None:
        if not self.page_rows:
            return None
        return self.page_rows[self.cursor]

    @property
    def select_help(self) -> KeyBinding:
        name = self.options.singular_item_name
        phrase = f"Select a {name}" if name else "Select an item"
        return binding(*self.keys.select.keys, description=phrase)

    @property
    def delete_help(self) -> KeyBinding:
        name = self.options.singular_item_name
        phrase = f"Delete a {name}" if name else "Delete an item"
        return binding(*self.keys.delete.keys, description=phrase)

    def help_bindings(self) -> list[KeyBinding]:
        bindings = [
            self.keys.up,
            self.keys.down,
            self.keys.previous_page,
            self.keys.next_page,
            self.keys.search,
            self.select_help,
        ]
        if self.allow_delete:
            bindings.append(self.delete_help)
        return bindings

    # =========================================================================
    # Updates
    # =========================================================================

    def update(self, event: Event) -> Selection | Deletion | None:
        """Handle a key press according to the current mode.

        Returns:
            A ``Selection`` or ``Deletion`` signal, or None.
        """
        match event:
            case KeyPress() if self.mode is Mode.SEARCH:
                if self.keys.exit_search.matches(event) or self.keys.search.matches(event):
                    self.mode = Mode.SELECT
                    return None
                self.search.handle(event)
            case KeyPress():
                signal = self._update_select(event)
                if signal is not None:
                    return signal
            case _:
                return None

        self._recompute()
        return None

    def _update_select(self, event: KeyPress) -> Selection | Deletion | None:
        keys = self.keys
        if keys.search.matches(event):
            self.mode = Mode.SEARCH
        elif keys.up.matches(event):
            if self.cursor == 0:
                self.mode = Mode.SEARCH
            else:
                self.cursor -= 1
        elif keys.down.matches(event):
            if self.cursor < len(self.page_rows) - 1:
                self.cursor += 1
        elif keys.previous_page.matches(event):
            if self.current_page > 0:
                self.current_page -= 1
        elif keys.next_page.matches(event):
            if self.current_page < self.num_pages - 1:
                self.current_page += 1
        elif keys.select.matches(event):
            row = self.selected_row
            return Selection(row.id) if row is not None else None
        elif keys.delete.matches(event) and self.allow_delete:
            row = self.selected_row
            return Deletion(row.id) if row is not None else None
        return None

    def update_rows(self, rows: Sequence[Row], columns: Sequence[Column] | None = None) -> None:
        """Replace the backing rows, and the columns when given."""
        self.rows = list(rows)
        if columns is not None:
            self.columns = list(columns)
        self._recompute()

    def update_highlighted(self, row_id: str) -> None:
        self.highlighted_id = row_id
        self._recompute()

    def _recompute(self) -> None:
        needle = self.search.value
        filtered = [row for row in self.rows if needle in row.id]

        if len(filtered) != len(self.filtered_rows):
            self.current_page = 0
            self.num_pages = page_count(len(filtered), self.page_size)
        self.filtered_rows = filtered

        start, end = calc_slice(len(filtered), self.current_page, self.page_size)
        self.page_rows = filtered[start:end]

        if self.cursor > len(self.page_rows) - 1:
            self.cursor = 0

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, theme: Theme) -> Group:
        searching = self.mode is Mode.SEARCH
        search_style = theme.selected if searching else theme.muted
        lines: list[Text] = [
            self.search.render(focused=searching, style=search_style),
            Text(""),
        ]

        if self.columns:
            header = Text("  ")
            for column in self.columns:
                header.append(column.label.ljust(column.width + 2), style="bold")
            lines.extend([header, Text("")])

        if not self.page_rows:
            item = self.options.singular_item_name or "item"
            lines.append(Text(f"  No {item}s found", style=theme.muted))
        for index, row in enumerate(self.page_rows):
            line = Text("> " if index == self.cursor else "  ")
            line.append(
                self._row_text(row),
                style=theme.highlight if row.id == self.highlighted_id else "",
            )
            lines.append(line)

        lines.extend([Text(""), self._paginator(theme)])
        return Group(*lines)

    def _row_text(self, row: Row) -> str:
        if not self.columns:
            return " ".join(row.values)
        cells = []
        for index, value in enumerate(row.values):
            width = self.columns[index].width if index < len(self.columns) else len(value)
            cells.append(value.ljust(width + 2))
        return "".join(cells).rstrip()

    def _paginator(self, theme: Theme) -> Text:
        text = Text("< " if self.current_page > 0 else "  ")
        text.append("[ ")
        for page in range(self.num_pages):
            style = theme.selected if page == self.current_page else theme.muted
            text.append(str(page + 1), style=style)
            if page < self.num_pages - 1:
                text.append("  ")
        text.append(" ]")
        if self.current_page < self.num_pages - 1:
            text.append(" >")
        return text

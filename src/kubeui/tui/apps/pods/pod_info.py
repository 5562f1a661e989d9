"""Tabbed detail view of a single pod.

The STATUS, ANNOTATIONS, LABELS and EVENTS tabs render tables; LOGS shows
the log tail of one container at a time, chosen with the number keys. Each
tab keeps its own scroll offset. The LOGS tab follows the end of the log
until the user scrolls up.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

from rich.console import Group
from rich.highlighter import JSONHighlighter
from rich.table import Table
from rich.text import Text

from kubeui.tui.apps.pods.state import NAMESPACE_SELECTION, SWITCH_NAMESPACE
from kubeui.tui.components.help import short_help
from kubeui.tui.engine.effects import Effect
from kubeui.tui.engine.events import Failed, KeyPress, PodLoaded, Resize
from kubeui.tui.engine.keys import binding
from kubeui.tui.engine.screen import Command, PopView, PushView, Screen

if TYPE_CHECKING:
    from kubeui.integrations.kubernetes.models import PodDetail
    from kubeui.tui.apps.pods.state import PodsState
    from kubeui.tui.engine.events import Event
    from kubeui.tui.engine.keys import KeyBinding
    from kubeui.tui.theme import Theme


class Tab(Enum):
    STATUS = "STATUS"
    ANNOTATIONS = "ANNOTATIONS"
    LABELS = "LABELS"
    EVENTS = "EVENTS"
    LOGS = "LOGS"


TABS = list(Tab)

PREVIOUS_TAB = binding("left", description="Previous tab")
NEXT_TAB = binding("right", description="Next tab")
SCROLL_UP = binding("up", "pageup", help_keys="up,pgup", description="Scroll up")
SCROLL_DOWN = binding("down", "pagedown", help_keys="down,pgdn", description="Scroll down")
PICK_CONTAINER = binding(
    *(str(n) for n in range(1, 10)), help_keys="1-9", description="Show container logs"
)

# Lines taken by help, status bar, tabs and table header.
CHROME_HEIGHT = 10

_json = JSONHighlighter()


def log_line(line: str) -> Text:
    """Render a log line, colouring it when it is a JSON object."""
    text = Text(line)
    if line.lstrip().startswith("{"):
        try:
            json.loads(line)
        except ValueError:
            return text
        _json.highlight(text)
    return text


class PodInfoScreen(Screen):
    """Shows status, metadata, events and logs of ``state.selected_pod``."""

    title = "Pod"

    def __init__(self, state: PodsState) -> None:
        self.state = state
        self.pod_name = state.selected_pod
        self.namespace = state.namespace
        self.detail: PodDetail | None = None
        self.loading = False
        self.tab = Tab.STATUS
        self.container = 0
        self.offsets: dict[Tab, int | None] = {tab: 0 for tab in TABS}
        self.offsets[Tab.LOGS] = None

    def init(self) -> Command | None:
        return self._get_pod()

    def _get_pod(self) -> Effect:
        self.loading = True
        backend, namespace, name = self.state.backend, self.namespace, self.pod_name
        return Effect("get_pod", lambda: PodLoaded(backend.get_pod(namespace, name)))

    # =========================================================================
    # Updates
    # =========================================================================

    def update(self, event: Event) -> Command | None:
        keys = self.state.keys
        match event:
            case Resize(width=width, height=height):
                self.state.resize(width, height)
            case PodLoaded(pod=detail) if detail.pod.name == self.pod_name:
                self.loading = False
                self.detail = detail
                if self.container >= len(detail.container_names):
                    self.container = 0
            case Failed(message=message):
                self.loading = False
                self.state.error = message
            case KeyPress() if keys.exit_view.matches(event):
                return PopView(reinitialize=False)
            case KeyPress() if keys.refresh.matches(event):
                return self._get_pod()
            case KeyPress() if SWITCH_NAMESPACE.matches(event):
                return PushView(NAMESPACE_SELECTION, reinitialize=True)
            case KeyPress() if PREVIOUS_TAB.matches(event):
                self.tab = TABS[(TABS.index(self.tab) - 1) % len(TABS)]
            case KeyPress() if NEXT_TAB.matches(event):
                self.tab = TABS[(TABS.index(self.tab) + 1) % len(TABS)]
            case KeyPress() if SCROLL_UP.matches(event):
                self._scroll(-self._step(event))
            case KeyPress() if SCROLL_DOWN.matches(event):
                self._scroll(self._step(event))
            case KeyPress() if self.tab is Tab.LOGS and PICK_CONTAINER.matches(event):
                self._pick_container(int(event.key) - 1)
            case _:
                pass
        return None

    def _pick_container(self, index: int) -> None:
        if self.detail is None or index >= len(self.detail.container_names):
            return
        self.container = index
        self.offsets[Tab.LOGS] = None

    @property
    def visible_lines(self) -> int:
        return max(1, self.state.height - CHROME_HEIGHT)

    def _step(self, event: KeyPress) -> int:
        return self.visible_lines if event.key in ("pageup", "pagedown") else 1

    def _max_offset(self) -> int:
        return max(0, len(self._lines()) - self.visible_lines)

    def _offset(self) -> int:
        offset = self.offsets[self.tab]
        top = self._max_offset()
        return top if offset is None else min(offset, top)

    def _scroll(self, delta: int) -> None:
        top = self._max_offset()
        offset = max(0, min(top, self._offset() + delta))
        # LOGS keeps following new output while scrolled to the end.
        self.offsets[self.tab] = None if self.tab is Tab.LOGS and offset == top else offset

    # =========================================================================
    # Content
    # =========================================================================

    @property
    def container_name(self) -> str | None:
        if self.detail is None or not self.detail.container_names:
            return None
        return self.detail.container_names[self.container]

    def _lines(self) -> list[tuple[str, ...]]:
        if self.detail is None:
            return []
        pod = self.detail.pod
        match self.tab:
            case Tab.STATUS:
                return [tuple(pod.display_values)]
            case Tab.ANNOTATIONS:
                return sorted(pod.annotations.items())
            case Tab.LABELS:
                return sorted(pod.labels.items())
            case Tab.EVENTS:
                return [tuple(event.display_values) for event in self.detail.events]
            case Tab.LOGS:
                logs = self.detail.logs.get(self.container_name or "", "")
                return [(line,) for line in logs.splitlines()]

    def _headers(self) -> tuple[str, ...]:
        match self.tab:
            case Tab.STATUS:
                return ("Name", "Ready", "Status", "Restarts", "Age")
            case Tab.ANNOTATIONS | Tab.LABELS:
                return ("Key", "Value")
            case Tab.EVENTS:
                return ("Type", "Reason", "Age", "From", "Message")
            case Tab.LOGS:
                return ()

    # =========================================================================
    # Rendering
    # =========================================================================

    def help_bindings(self) -> list[list[KeyBinding]]:
        return [[PREVIOUS_TAB, NEXT_TAB, SCROLL_UP, SCROLL_DOWN, PICK_CONTAINER, SWITCH_NAMESPACE]]

    def render(self, theme: Theme) -> Group:
        keys = self.state.keys
        parts: list[Text | Table | Group] = [
            short_help(theme, [keys.help, keys.quit, keys.exit_view, keys.refresh, NEXT_TAB]),
            Text(""),
            self.state.status_bar(theme),
            Text(f"Pod: {self.pod_name}", style="bold"),
            Text(""),
            self._tab_bar(theme),
            Text(""),
        ]
        if self.detail is None:
            parts.append(Text("Loading..." if self.loading else f"No data for pod {self.pod_name}"))
            return Group(*parts)

        if self.tab is Tab.LOGS:
            parts.extend(self._render_logs(theme))
        else:
            parts.append(self._render_table(theme))
        return Group(*parts)

    def _tab_bar(self, theme: Theme) -> Text:
        text = Text()
        for tab in TABS:
            style = theme.tab_active if tab is self.tab else theme.tab_inactive
            text.append(f" {tab.value} ", style=style)
            text.append(" ")
        return text

    def _window(self) -> list[tuple[str, ...]]:
        offset = self._offset()
        return self._lines()[offset : offset + self.visible_lines]

    def _render_table(self, theme: Theme) -> Table | Text:
        rows = self._window()
        if not rows:
            return Text(f"No {self.tab.value.lower()}", style=theme.muted)
        table = Table(box=None, show_edge=False, pad_edge=False, header_style="bold")
        for header in self._headers():
            table.add_column(header, overflow="fold")
        for row in rows:
            cells = list(row)
            if self.tab is Tab.STATUS:
                status = Text(cells[2], style=theme.status_style(cells[2]))
                table.add_row(*cells[:2], status, *cells[3:])
            else:
                table.add_row(*cells)
        return table

    def _render_logs(self, theme: Theme) -> list[Text]:
        names = self.detail.container_names if self.detail is not None else []
        containers = Text()
        for index, name in enumerate(names):
            style = theme.selected if index == self.container else theme.muted
            containers.append(f"{index + 1} {name}", style=style)
            containers.append("  ")
        lines = [containers, Text("")]
        window = self._window()
        if not window:
            lines.append(Text("No logs", style=theme.muted))
        lines.extend(log_line(line) for (line,) in window)
        return lines

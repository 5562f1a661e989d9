"""Pod list for the active namespace."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from rich.console import Group
from rich.text import Text

from kubeui.tui.apps.pods.state import NAMESPACE_SELECTION, POD_INFO, SWITCH_NAMESPACE
from kubeui.tui.components.dialog import ConfirmDialog
from kubeui.tui.components.help import short_help
from kubeui.tui.components.list_engine import (
    Column,
    Deletion,
    ListEngine,
    ListOptions,
    Row,
    Selection,
    size_columns,
)
from kubeui.tui.engine.effects import Effect
from kubeui.tui.engine.events import Failed, KeyPress, PodDeleted, PodsLoaded, Resize
from kubeui.tui.engine.screen import Command, PushView, Screen

if TYPE_CHECKING:
    from kubeui.integrations.kubernetes.models import PodSummary
    from kubeui.tui.apps.pods.state import PodsState
    from kubeui.tui.components.dialog import ButtonPress
    from kubeui.tui.engine.events import Event
    from kubeui.tui.engine.keys import KeyBinding
    from kubeui.tui.theme import Theme

logger = structlog.get_logger()

POD_COLUMNS = (
    Column("Name", 4),
    Column("Ready", 5),
    Column("Status", 6),
    Column("Restarts", 8),
    Column("Age", 3),
)


def pod_rows(pods: list[PodSummary]) -> list[Row]:
    return [Row(id=pod.name, values=tuple(pod.display_values)) for pod in pods]


class PodSelectionScreen(Screen):
    """Browse, open and delete the pods of ``state.namespace``."""

    title = "Pods"

    def __init__(self, state: PodsState) -> None:
        self.state = state
        self.table: ListEngine | None = None
        self.dialog: ConfirmDialog | None = None
        self.loading = False

    def init(self) -> Command | None:
        return self._list_pods()

    def _list_pods(self) -> Effect:
        self.loading = True
        backend, namespace = self.state.backend, self.state.namespace
        return Effect("list_pods", lambda: PodsLoaded(backend.list_pods(namespace)))

    def _delete_pod(self, name: str) -> Effect:
        backend, namespace = self.state.backend, self.state.namespace
        logger.info("pod_delete_requested", namespace=namespace, pod=name)
        return Effect("delete_pod", lambda: PodDeleted(backend.delete_pod(namespace, name)))

    def update(self, event: Event) -> Command | None:
        keys = self.state.keys
        match event:
            case Resize(width=width, height=height):
                self.state.resize(width, height)
            case PodsLoaded(pods=pods):
                self.loading = False
                self._load(pods)
            case PodDeleted(name=name):
                if self.table is not None:
                    self.table.update_rows([row for row in self.table.rows if row.id != name])
                return self._list_pods()
            case Failed(message=message):
                self.loading = False
                self.state.error = message
            case KeyPress() if self.dialog is not None:
                if keys.exit_view.matches(event):
                    self.dialog = None
                    return None
                press = self.dialog.update(event)
                if press is not None:
                    return self._handle_button(press)
            case KeyPress() if SWITCH_NAMESPACE.matches(event):
                return PushView(NAMESPACE_SELECTION, reinitialize=True)
            case KeyPress() if keys.refresh.matches(event):
                return self._list_pods()
            case KeyPress() if self.table is not None:
                match self.table.update(event):
                    case Selection(id=name):
                        self.state.selected_pod = name
                        return PushView(POD_INFO, reinitialize=True)
                    case Deletion(id=name):
                        self.dialog = ConfirmDialog.yes_no(
                            f"Are you sure you want to delete {name}", name
                        )
                    case _:
                        pass
            case _:
                pass
        return None

    def _load(self, pods: list[PodSummary]) -> None:
        rows = pod_rows(pods)
        columns = size_columns(POD_COLUMNS, rows)
        if self.table is None:
            self.table = ListEngine(
                columns=columns,
                rows=rows,
                page_size=self.state.page_size,
                allow_delete=True,
                options=ListOptions(singular_item_name="pod", start_in_search_mode=True),
            )
        else:
            self.table.update_rows(rows, columns)

    def _handle_button(self, press: ButtonPress) -> Command | None:
        self.dialog = None
        if press.button.label == "Yes":
            return self._delete_pod(press.id)
        return None

    def help_bindings(self) -> list[list[KeyBinding]]:
        if self.table is None:
            return [[SWITCH_NAMESPACE]]
        return [[SWITCH_NAMESPACE], self.table.help_bindings()]

    def _short_help(self, theme: Theme) -> Text:
        keys = self.state.keys
        bindings = [keys.help, keys.quit, SWITCH_NAMESPACE, keys.refresh]
        if self.table is not None:
            bindings.extend([self.table.select_help, self.table.delete_help])
        return short_help(theme, bindings)

    def render(self, theme: Theme) -> Group:
        parts: list[Text | Group] = [
            self._short_help(theme),
            Text(""),
            self.state.status_bar(theme),
            Text(""),
        ]
        if self.dialog is not None:
            parts.append(self.dialog.render(theme))
        elif self.loading and self.table is None:
            parts.append(Text("Loading..."))
        elif self.table is None or not self.table.rows:
            parts.append(Text(f"No pods found in namespace {self.state.namespace}"))
        else:
            parts.append(self.table.render(theme))
        return Group(*parts)

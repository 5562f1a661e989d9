"""Namespace picker."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from rich.console import Group
from rich.text import Text

from kubeui.integrations.kubernetes.exceptions import KubeconfigError
from kubeui.tui.apps.pods.state import ERROR_INFO, POD_SELECTION
from kubeui.tui.components.help import short_help
from kubeui.tui.components.list_engine import ListEngine, ListOptions, Mode, Row, Selection
from kubeui.tui.engine.effects import Effect
from kubeui.tui.engine.events import Failed, KeyPress, NamespacesLoaded, Resize
from kubeui.tui.engine.screen import Command, PopView, PushView, Screen

if TYPE_CHECKING:
    from kubeui.tui.apps.pods.state import PodsState
    from kubeui.tui.engine.events import Event
    from kubeui.tui.engine.keys import KeyBinding
    from kubeui.tui.theme import Theme

logger = structlog.get_logger()


class NamespaceSelectionScreen(Screen):
    """Lists the cluster's namespaces and makes the chosen one the context default."""

    title = "Namespaces"

    def __init__(self, state: PodsState) -> None:
        self.state = state
        self.table: ListEngine | None = None
        self.loading = False

    def init(self) -> Command | None:
        self.loading = True
        backend = self.state.backend
        return Effect("list_namespaces", lambda: NamespacesLoaded(backend.list_namespaces()))

    def update(self, event: Event) -> Command | None:
        match event:
            case Resize(width=width, height=height):
                self.state.resize(width, height)
            case NamespacesLoaded(namespaces=namespaces):
                self.loading = False
                self._load(namespaces)
            case Failed(message=message):
                self.loading = False
                self.state.error = message
            case KeyPress() if self.state.keys.refresh.matches(event):
                return self.init()
            case KeyPress() if self.table is None:
                if self.state.keys.exit_view.matches(event):
                    return PopView()
            case KeyPress():
                if self.table.mode is Mode.SELECT and self.state.keys.exit_view.matches(event):
                    return PopView()
                match self.table.update(event):
                    case Selection(id=namespace):
                        return self._select(namespace)
                    case _:
                        pass
            case _:
                pass
        return None

    def _load(self, namespaces: list[str]) -> None:
        rows = [Row.of(name) for name in namespaces]
        if self.table is None:
            self.table = ListEngine(
                columns=[],
                rows=rows,
                page_size=self.state.page_size,
                highlighted_id=self.state.namespace,
                options=ListOptions(singular_item_name="namespace", start_in_search_mode=True),
            )
        else:
            self.table.update_rows(rows)

    def _select(self, namespace: str) -> Command | None:
        try:
            self.state.store.switch_context(self.state.context, namespace)
        except KubeconfigError as e:
            logger.warning("namespace_switch_failed", namespace=namespace, error=str(e))
            self.state.error = str(e)
            return PushView(ERROR_INFO, params={"message": str(e)})
        logger.info("namespace_selected", context=self.state.context, namespace=namespace)
        self.state.namespace = namespace
        return PushView(POD_SELECTION, reinitialize=True)

    def help_bindings(self) -> list[list[KeyBinding]]:
        return [self.table.help_bindings()] if self.table is not None else []

    def render(self, theme: Theme) -> Group:
        keys = self.state.keys
        parts: list[Text | Group] = [
            short_help(theme, [keys.help, keys.quit, keys.exit_view, keys.refresh]),
            Text(""),
            self.state.status_bar(theme),
            Text(""),
        ]
        if self.table is None:
            parts.append(Text("Loading..." if self.loading else "No namespaces loaded"))
        else:
            parts.append(self.table.render(theme))
        return Group(*parts)

"""Context switcher screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from rich.console import Group
from rich.text import Text

from kubeui.integrations.kubernetes.exceptions import KubeconfigError
from kubeui.tui.components.dialog import ButtonPress, ConfirmDialog
from kubeui.tui.components.help import short_help
from kubeui.tui.components.list_engine import (
    Deletion,
    ListEngine,
    ListOptions,
    Mode,
    Row,
    Selection,
)
from kubeui.tui.engine.events import KeyPress
from kubeui.tui.engine.keys import DEFAULT_GLOBAL_KEYS, GlobalKeys
from kubeui.tui.engine.screen import Command, Screen

if TYPE_CHECKING:
    from kubeui.integrations.kubernetes.kubeconfig import KubeconfigStore
    from kubeui.tui.engine.events import Event
    from kubeui.tui.engine.keys import KeyBinding
    from kubeui.tui.theme import Theme

logger = structlog.get_logger()


class ContextSelectionScreen(Screen):
    """Lists kubeconfig contexts; switches on enter and deletes on confirmation.

    Args:
        store: Kubeconfig-backed context store.
        page_size: Contexts per page.
        keys: Global key bindings.
    """

    title = "Contexts"

    def __init__(
        self,
        store: KubeconfigStore,
        page_size: int = 10,
        keys: GlobalKeys = DEFAULT_GLOBAL_KEYS,
    ) -> None:
        self.store = store
        self.keys = keys
        self.dialog: ConfirmDialog | None = None
        self.error: str | None = None
        self.table = ListEngine(
            columns=[],
            rows=self._rows(),
            page_size=page_size,
            highlighted_id=store.current_context(),
            allow_delete=True,
            options=ListOptions(singular_item_name="context"),
        )

    def _rows(self) -> list[Row]:
        return [Row.of(name) for name in sorted(self.store.list_contexts())]

    def update(self, event: Event) -> Command | None:
        match event:
            case KeyPress() if self.dialog is not None:
                if self.keys.exit_view.matches(event):
                    self.dialog = None
                    return None
                press = self.dialog.update(event)
                if press is not None:
                    self._handle_button(press)
            case KeyPress():
                match self.table.update(event):
                    case Selection(id=name):
                        self._switch(name)
                    case Deletion(id=name):
                        self.dialog = ConfirmDialog.yes_no(
                            f"Are you sure you want to delete {name}", name
                        )
                    case _:
                        pass
            case _:
                pass
        return None

    def _switch(self, name: str) -> None:
        try:
            self.store.switch_context(name)
        except KubeconfigError as e:
            logger.warning("context_switch_failed", context=name, error=str(e))
            self.error = str(e)
            return
        self.error = None
        self.table.update_highlighted(name)

    def _handle_button(self, press: ButtonPress) -> None:
        self.dialog = None
        if press.button.label != "Yes":
            return
        try:
            self.store.remove_context(press.id)
        except KubeconfigError as e:
            logger.warning("context_delete_failed", context=press.id, error=str(e))
            self.error = str(e)
            return
        self.error = None
        self.table.update_rows(self._rows())

    def global_bindings(self, keys: GlobalKeys) -> list[KeyBinding]:
        return [keys.help, keys.quit]

    def help_bindings(self) -> list[list[KeyBinding]]:
        return [self.table.help_bindings()]

    def render(self, theme: Theme) -> Group:
        parts: list[Text | Group] = [
            short_help(
                theme,
                [self.keys.help, self.keys.quit, self.table.select_help, self.table.delete_help],
            ),
            Text(""),
        ]
        if self.dialog is not None:
            parts.append(self.dialog.render(theme))
        else:
            parts.append(self.table.render(theme))
        if self.error:
            parts.extend([Text(""), Text(f"Error: {self.error}", style=theme.error)])
        if self.table.mode is Mode.SEARCH:
            parts.extend([Text(""), Text("Type to filter contexts", style=theme.muted)])
        return Group(*parts)

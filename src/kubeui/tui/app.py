"""Textual host for the view loop.

``KubeUIApp`` owns the terminal: it turns Textual key and resize events into
loop events, runs effects in thread workers and repaints a single widget
with whatever the active screen renders.

Usage:
    from kubeui.tui.app import KubeUIApp

    app = KubeUIApp(router, error_route="error_info")
    app.run()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from textual import events, on, work
from textual.app import App, ComposeResult
from textual.message import Message
from textual.widgets import Static

from kubeui.tui.engine.events import EffectResult, KeyPress, Resize
from kubeui.tui.engine.keys import DEFAULT_GLOBAL_KEYS, GlobalKeys
from kubeui.tui.engine.loop import EventLoop
from kubeui.tui.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from kubeui.tui.engine.effects import Effect
    from kubeui.tui.engine.events import Event
    from kubeui.tui.engine.router import Router

logger = structlog.get_logger()


class EffectCompleted(Message):
    """Posted from a worker thread when an effect has produced its event."""

    def __init__(self, result: EffectResult) -> None:
        super().__init__()
        self.result = result


class ViewPort(Static):
    """Displays the active screen's rendering."""

    DEFAULT_CSS = """
    ViewPort {
        height: 1fr;
        padding: 1 2;
    }
    """


class WorkerScheduler:
    """Scheduler that runs each effect in a Textual thread worker."""

    def __init__(self, app: KubeUIApp) -> None:
        self._app = app

    def submit(self, effect: Effect, generation: int) -> None:
        self._app.run_effect(effect, generation)


class KubeUIApp(App[None], inherit_bindings=False):
    """Terminal application hosting one ``EventLoop``.

    Args:
        router: Router already holding the starting screen.
        error_route: Screen shown for collaborator failures, if any.
        keys: Global key bindings.
        view_theme: Styles handed to every render call.
    """

    TITLE = "kubeui"
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        router: Router,
        error_route: str | None = None,
        keys: GlobalKeys = DEFAULT_GLOBAL_KEYS,
        view_theme: Theme = DEFAULT_THEME,
    ) -> None:
        super().__init__()
        self.view_theme = view_theme
        self.loop = EventLoop(
            router,
            scheduler=WorkerScheduler(self),
            keys=keys,
            error_route=error_route,
        )

    def compose(self) -> ComposeResult:
        yield ViewPort(id="view")

    def on_mount(self) -> None:
        """Start the loop with the terminal's current size."""
        self.loop.dispatch(Resize(self.size.width, self.size.height))
        self.loop.start()
        self._repaint()

    # =========================================================================
    # Input
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.deliver(KeyPress(event.key, event.character))

    def on_resize(self, event: events.Resize) -> None:
        self.deliver(Resize(event.size.width, event.size.height))

    @on(EffectCompleted)
    def handle_effect_completed(self, message: EffectCompleted) -> None:
        self.deliver(message.result)

    def deliver(self, event: Event) -> None:
        """Feed one event to the loop and repaint, or exit if it asked to."""
        self.loop.dispatch(event)
        if self.loop.exit_requested:
            self.exit()
            return
        self._repaint()

    # =========================================================================
    # Effects
    # =========================================================================

    @work(thread=True, group="effects")
    def run_effect(self, effect: Effect, generation: int) -> None:
        """Run an effect off the UI thread and post its result back."""
        event = effect.execute()
        self.post_message(
            EffectCompleted(EffectResult(effect.operation, generation, event, effect.target))
        )

    def _repaint(self) -> None:
        self.query_one(ViewPort).update(self.loop.render(self.view_theme))

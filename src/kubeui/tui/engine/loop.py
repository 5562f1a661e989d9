"""The top-level event loop.

The loop is synchronous and host-agnostic: a host (the Textual app, or a
test) feeds it events one at a time and asks it to render. Blocking work
leaves through the scheduler and comes back as ``EffectResult`` events,
which go to the screen that issued them even after the user has moved on.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import structlog

from kubeui.errors import UnknownRouteError
from kubeui.tui.components.help import full_help
from kubeui.tui.engine.effects import Effect, EffectTracker, Scheduler
from kubeui.tui.engine.events import EffectResult, Event, Failed, KeyPress, Resize
from kubeui.tui.engine.keys import DEFAULT_GLOBAL_KEYS, GlobalKeys
from kubeui.tui.engine.screen import Command, PopView, PushView, Quit, Screen

if TYPE_CHECKING:
    from rich.console import RenderableType

    from kubeui.tui.engine.router import Router, Transition
    from kubeui.tui.theme import Theme

logger = structlog.get_logger()


class EventLoop:
    """Routes events to the active screen and applies the commands it returns.

    Args:
        router: Router holding the active screen.
        scheduler: Executes effects off the update path.
        keys: Global key bindings.
        error_route: Screen pushed with ``{"message": ...}`` whenever a
            ``Failed`` event arrives, after the active screen has seen the
            failure. Without one, failures only go to the active screen.
    """

    def __init__(
        self,
        router: Router,
        scheduler: Scheduler,
        keys: GlobalKeys = DEFAULT_GLOBAL_KEYS,
        error_route: str | None = None,
    ) -> None:
        self.router = router
        self.keys = keys
        self.error_route = error_route
        self.show_help = False
        self.exit_requested = False
        self._scheduler = scheduler
        self._tracker = EffectTracker()
        self._size: Resize | None = None

    def start(self) -> None:
        """Initialize the starting screen."""
        logger.info("loop_started", screen=self.router.current_name)
        self._apply(self.router.current.init())

    def dispatch(self, event: Event) -> None:
        """Process one event to completion."""
        match event:
            case EffectResult():
                if not self._tracker.is_current(event):
                    logger.debug(
                        "dropped_stale_result",
                        operation=event.operation,
                        generation=event.generation,
                    )
                    return
                target = self.router.cached(event.target) if event.target else None
                if target is None or target is self.router.current:
                    self.dispatch(event.event)
                else:
                    self._update_cached(event.target, target, event.event)
                return
            case Resize():
                self._size = event
            case KeyPress() if self.show_help:
                self.show_help = False
                return
            case KeyPress() if self.keys.quit.matches(event):
                self._apply(Quit())
                return
            case KeyPress() if self.keys.help.matches(event):
                self.show_help = True
                return
            case Failed() if self.error_route:
                logger.warning(
                    "collaborator_failed", operation=event.operation, error=event.message
                )
                self._apply(self.router.current.update(event))
                self._apply(PushView(self.error_route, params={"message": event.message}))
                return
            case _:
                pass

        self._apply(self.router.current.update(event))

    def render(self, theme: Theme) -> RenderableType:
        if self.show_help:
            screen = self.router.current
            columns = [screen.global_bindings(self.keys), *screen.help_bindings()]
            return full_help(theme, columns, title=screen.title)
        return self.router.current.render(theme)

    # =========================================================================
    # Command Handling
    # =========================================================================

    def _apply(self, command: Command | None) -> None:
        match command:
            case None:
                return
            case Effect():
                if not command.target:
                    command = replace(command, target=self.router.current_name)
                generation = self._tracker.issue(command)
                logger.debug("effect_issued", operation=command.operation, generation=generation)
                self._scheduler.submit(command, generation)
            case PushView(target=target, reinitialize=reinitialize, params=params):
                try:
                    transition = self.router.push(target, params, reinitialize)
                except UnknownRouteError as e:
                    logger.error("unknown_route", screen=e.name, current=self.router.current_name)
                    return
                self._enter(transition, reinitialize)
            case PopView(reinitialize=reinitialize):
                transition = self.router.pop(reinitialize)
                if transition is not None:
                    self._enter(transition, reinitialize)
            case Quit():
                logger.info("loop_exit_requested", screen=self.router.current_name)
                self.exit_requested = True
            case _:
                logger.warning("unknown_command", command=repr(command))

    def _update_cached(self, name: str, screen: Screen, event: Event) -> None:
        """Hand a result to a screen that is cached but no longer active.

        Follow-up effects are kept. Navigation from a screen the user has
        left is ignored, and failures are not raised as an error screen.
        """
        if isinstance(event, Failed):
            logger.warning(
                "collaborator_failed",
                operation=event.operation,
                error=event.message,
                screen=name,
            )
        match screen.update(event):
            case None:
                pass
            case Effect() as effect:
                self._apply(replace(effect, target=name))
            case command:
                logger.debug("inactive_screen_command_ignored", screen=name, command=repr(command))

    def _enter(self, transition: Transition, reinitialize: bool) -> None:
        for screen in transition.discarded:
            self._apply(screen.destroy())

        screen = transition.screen
        logger.debug("screen_activated", screen=self.router.current_name)
        if self._size is not None:
            self._apply(screen.update(self._size))
        if reinitialize or transition.created:
            self._apply(screen.init())

"""Screen registry and navigation stack."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from kubeui.errors import UnknownRouteError
from kubeui.tui.engine.screen import Screen, ScreenFactory

logger = structlog.get_logger()


@dataclass
class Transition:
    """Outcome of a push or pop.

    Attributes:
        screen: The screen that is now active.
        created: Whether ``screen`` was freshly built by its factory.
        discarded: Instances replaced during the transition; the caller
            destroys them.
    """

    screen: Screen
    created: bool
    discarded: list[Screen] = field(default_factory=list)


class Router:
    """Owns the active screen, the factory registry and the back stack.

    Every name on the stack has exactly one cached instance. Screens that
    are popped stay cached so a later ``push(..., reinitialize=False)``
    returns to them without reloading.

    Args:
        state: Shared state handed to every factory.
        routes: Initial name to factory registrations.
        initial: Name of the screen to start on.
        params: Parameters for the initial screen.

    Raises:
        UnknownRouteError: If ``initial`` is not registered.
    """

    def __init__(
        self,
        state: Any,
        routes: Mapping[str, ScreenFactory],
        initial: str,
        params: Mapping[str, str] | None = None,
    ) -> None:
        self._state = state
        self._routes: dict[str, ScreenFactory] = dict(routes)
        self._instances: dict[str, Screen] = {}
        self._params: dict[str, Mapping[str, str]] = {}
        self._stack: list[str] = [initial]
        self._build(initial, params or {})

    # =========================================================================
    # Registry
    # =========================================================================

    def register(self, name: str, factory: ScreenFactory) -> None:
        """Register a factory, replacing any earlier one for ``name``."""
        self._routes[name] = factory

    def _factory(self, name: str) -> ScreenFactory:
        try:
            return self._routes[name]
        except KeyError:
            raise UnknownRouteError(name) from None

    def _build(self, name: str, params: Mapping[str, str]) -> Screen:
        screen = self._factory(name)(self._state, params)
        self._instances[name] = screen
        self._params[name] = params
        logger.debug("screen_built", screen=name)
        return screen

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def current(self) -> Screen:
        return self._instances[self._stack[-1]]

    @property
    def current_name(self) -> str:
        return self._stack[-1]

    @property
    def history(self) -> tuple[str, ...]:
        """Stack of screen names, oldest first."""
        return tuple(self._stack)

    @property
    def state(self) -> Any:
        return self._state

    def cached(self, name: str) -> Screen | None:
        return self._instances.get(name)

    def instances(self) -> list[Screen]:
        return list(self._instances.values())

    # =========================================================================
    # Navigation
    # =========================================================================

    def navigate(
        self, name: str, state: Any = None, params: Mapping[str, str] | None = None
    ) -> Screen:
        """Replace the active screen with a new instance of ``name``.

        The previous instance is dropped without calling ``destroy()``.

        Raises:
            UnknownRouteError: If ``name`` is not registered. The active
                screen is left untouched.
        """
        factory = self._factory(name)
        if state is not None:
            self._state = state
        screen = factory(self._state, params or {})

        self._instances.pop(self._stack[-1], None)
        self._stack = [entry for entry in self._stack[:-1] if entry != name]
        self._stack.append(name)
        self._instances[name] = screen
        self._params[name] = params or {}
        logger.debug("navigated", screen=name)
        return screen

    def push(
        self,
        name: str,
        params: Mapping[str, str] | None = None,
        reinitialize: bool = True,
    ) -> Transition:
        """Activate ``name`` on top of the stack.

        If ``name`` is already on the stack, everything above it is unwound
        instead of pushing a second entry.

        Raises:
            UnknownRouteError: If ``name`` is not registered.
        """
        self._factory(name)
        if name in self._stack:
            del self._stack[self._stack.index(name) + 1 :]
        else:
            self._stack.append(name)
        return self._activate(name, params, reinitialize)

    def pop(self, reinitialize: bool = False) -> Transition | None:
        """Return to the previous stack entry, or None if there is none."""
        if len(self._stack) <= 1:
            logger.debug("pop_ignored", screen=self.current_name)
            return None
        self._stack.pop()
        name = self._stack[-1]
        return self._activate(name, self._params.get(name), reinitialize)

    def _activate(
        self, name: str, params: Mapping[str, str] | None, reinitialize: bool
    ) -> Transition:
        cached = self._instances.get(name)
        if cached is not None and not reinitialize:
            return Transition(screen=cached, created=False)

        screen = self._build(name, params if params is not None else self._params.get(name, {}))
        return Transition(
            screen=screen,
            created=True,
            discarded=[cached] if cached is not None else [],
        )

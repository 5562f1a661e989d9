"""Screen lifecycle contract and the navigation commands screens return.

A screen is created by a factory, initialized once, receives every event
while it is active, renders on demand and is destroyed when the router
discards it::

    CREATED -> init() -> ACTIVE -> update()* -> destroy() -> discarded

``init``, ``update`` and ``destroy`` return at most one ``Command``. Screens
never call the router themselves; they return ``PushView``/``PopView`` and
the loop performs the navigation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from kubeui.tui.engine.effects import Effect
from kubeui.tui.engine.keys import GlobalKeys, KeyBinding

if TYPE_CHECKING:
    from rich.console import RenderableType

    from kubeui.tui.engine.events import Event
    from kubeui.tui.theme import Theme


@dataclass(frozen=True)
class PushView:
    """Make ``target`` the active screen.

    Attributes:
        target: Registered screen name.
        reinitialize: Build a fresh instance and call ``init()``. When False a
            cached instance is reused as-is.
        params: String-keyed parameters handed to the factory.
    """

    target: str
    reinitialize: bool = True
    params: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PopView:
    """Return to the previous screen, calling its ``init()`` when ``reinitialize``."""

    reinitialize: bool = False


@dataclass(frozen=True)
class Quit:
    """Stop the loop and exit normally."""


Command = Effect | PushView | PopView | Quit


class Screen(ABC):
    """A self-contained interactive view."""

    #: Short title shown in the heading of the help overlay.
    title: str = ""

    def init(self) -> Command | None:
        """Called when the screen becomes active after being (re)built."""
        return None

    @abstractmethod
    def update(self, event: Event) -> Command | None:
        """Handle one event."""

    @abstractmethod
    def render(self, theme: Theme) -> RenderableType:
        """Render the current state."""

    def destroy(self) -> Command | None:
        """Called once when the router discards this instance."""
        return None

    def global_bindings(self, keys: GlobalKeys) -> list[KeyBinding]:
        """The global keys this screen responds to, listed first in the help overlay."""
        return [keys.help, keys.quit, keys.exit_view, keys.refresh]

    def help_bindings(self) -> list[list[KeyBinding]]:
        """Key bindings listed in the full help overlay, grouped in columns."""
        return []


ScreenFactory = Callable[[Any, Mapping[str, str]], Screen]

"""Recording screens for router and loop tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest
from rich.text import Text

from kubeui.tui.engine.effects import ImmediateScheduler
from kubeui.tui.engine.events import Event
from kubeui.tui.engine.screen import Command, Screen
from kubeui.tui.theme import Theme


class RecordingScreen(Screen):
    """Screen that records lifecycle calls and replies with queued commands."""

    def __init__(self, name: str, params: Mapping[str, str]) -> None:
        self.name = name
        self.params = dict(params)
        self.events: list[Event] = []
        self.init_calls = 0
        self.destroy_calls = 0
        self.replies: list[Command | None] = []
        self.init_reply: Command | None = None

    def init(self) -> Command | None:
        self.init_calls += 1
        return self.init_reply

    def update(self, event: Event) -> Command | None:
        self.events.append(event)
        return self.replies.pop(0) if self.replies else None

    def render(self, theme: Theme) -> Text:
        return Text(f"screen {self.name}")

    def destroy(self) -> Command | None:
        self.destroy_calls += 1
        return None


def factory(name: str):
    def build(state: Any, params: Mapping[str, str]) -> RecordingScreen:
        screen = RecordingScreen(name, params)
        state.setdefault(name, []).append(screen)
        return screen

    return build


@pytest.fixture
def built() -> dict[str, list[RecordingScreen]]:
    """Shared state: every instance built, per route name."""
    return {}


@pytest.fixture
def routes() -> dict[str, Any]:
    return {name: factory(name) for name in ("a", "b", "c", "error")}


@pytest.fixture
def scheduler() -> ImmediateScheduler:
    return ImmediateScheduler()

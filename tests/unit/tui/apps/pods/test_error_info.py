"""Unit tests for the error screen."""

from __future__ import annotations

import pytest
from rich.console import Console

from kubeui.tui.apps.pods.error_info import GO_BACK, ErrorInfoScreen
from kubeui.tui.engine.events import KeyPress
from kubeui.tui.engine.keys import DEFAULT_GLOBAL_KEYS
from kubeui.tui.engine.screen import PopView
from kubeui.tui.theme import DEFAULT_THEME


@pytest.mark.unit
class TestErrorInfoScreen:
    """Tests for ErrorInfoScreen."""

    def test_render(self) -> None:
        """The message is shown under a heading."""
        console = Console(width=80, record=True)
        console.print(ErrorInfoScreen("Kubernetes operation timed out").render(DEFAULT_THEME))
        text = console.export_text()

        assert "An error occured" in text
        assert "Kubernetes operation timed out" in text

    @pytest.mark.parametrize(("key", "character"), [("enter", "\r"), ("space", " ")])
    def test_go_back(self, key: str, character: str) -> None:
        """enter and space return to the previous screen."""
        assert ErrorInfoScreen("boom").update(KeyPress(key, character)) == PopView()

    def test_other_keys_ignored(self) -> None:
        """Anything else keeps the error on screen."""
        assert ErrorInfoScreen("boom").update(KeyPress("x", "x")) is None

    def test_help_lists_only_handled_keys(self) -> None:
        """Escape and refresh do nothing here, so help leaves them out."""
        keys = DEFAULT_GLOBAL_KEYS
        screen = ErrorInfoScreen("boom")

        assert screen.global_bindings(keys) == [keys.help, keys.quit]
        assert screen.help_bindings() == [[GO_BACK]]

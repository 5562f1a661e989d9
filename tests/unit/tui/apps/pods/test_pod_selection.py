"""Unit tests for the pod list screen."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from rich.console import Console

from kubeui.integrations.kubernetes.models import PodSummary
from kubeui.tui.apps.pods.pod_selection import PodSelectionScreen
from kubeui.tui.apps.pods.state import NAMESPACE_SELECTION, POD_INFO, PodsState
from kubeui.tui.components.list_engine import Mode
from kubeui.tui.engine.effects import Effect
from kubeui.tui.engine.events import Failed, KeyPress, PodDeleted, PodsLoaded
from kubeui.tui.engine.screen import PushView
from kubeui.tui.theme import DEFAULT_THEME
from tests.unit.tui.apps.pods.conftest import make_pod


def render_text(screen: PodSelectionScreen) -> str:
    console = Console(width=120, record=True)
    console.print(screen.render(DEFAULT_THEME))
    return console.export_text()


@pytest.fixture
def screen(state: PodsState) -> PodSelectionScreen:
    screen = PodSelectionScreen(state)
    effect = screen.init()
    assert isinstance(effect, Effect)
    screen.update(effect.execute())
    return screen


# ============================================================================
# Loading
# ============================================================================


@pytest.mark.unit
class TestPodLoading:
    """Tests for loading and refreshing pods."""

    def test_init_lists_pods_in_namespace(self, state: PodsState, backend: MagicMock) -> None:
        """init loads the pods of the state's namespace."""
        screen = PodSelectionScreen(state)

        effect = screen.init()

        assert isinstance(effect, Effect)
        assert effect.operation == "list_pods"
        assert "Loading..." in render_text(screen)
        effect.execute()
        backend.list_pods.assert_called_once_with("shop")

    def test_first_load_builds_table(self, screen: PodSelectionScreen) -> None:
        """The first result creates a deletable table in search mode."""
        assert screen.table is not None
        assert [row.id for row in screen.table.rows] == ["web-1", "web-2", "db-1"]
        assert screen.table.allow_delete is True
        assert screen.table.mode is Mode.SEARCH
        assert [c.width for c in screen.table.columns] == [5, 5, 16, 8, 3]

    def test_later_loads_update_rows(
        self, screen: PodSelectionScreen, pods: list[PodSummary]
    ) -> None:
        """Refreshes keep the table and its filter."""
        table = screen.table
        screen.update(KeyPress("w", "w"))

        screen.update(PodsLoaded([*pods, make_pod("worker-1")]))

        assert screen.table is table
        assert [row.id for row in table.filtered_rows] == ["web-1", "web-2", "worker-1"]

    def test_refresh_key(self, screen: PodSelectionScreen) -> None:
        """ctrl+r reloads the pods."""
        command = screen.update(KeyPress("ctrl+r"))
        assert isinstance(command, Effect)
        assert command.operation == "list_pods"
        assert screen.loading is True

    def test_empty_namespace(self, state: PodsState) -> None:
        """An empty namespace says so."""
        screen = PodSelectionScreen(state)
        screen.init()
        screen.update(PodsLoaded([]))

        assert "No pods found in namespace shop" in render_text(screen)

    def test_failure_stops_loading(self, state: PodsState) -> None:
        """A failed load records the error and stops the loading message."""
        screen = PodSelectionScreen(state)
        screen.init()

        screen.update(Failed("list_pods", "forbidden"))

        assert screen.loading is False
        assert state.error == "forbidden"
        assert "Loading..." not in render_text(screen)

    def test_render_table(self, screen: PodSelectionScreen) -> None:
        """The status bar, headers and pods are rendered."""
        text = render_text(screen)

        assert "Context: dev  Namespace: shop" in text
        assert "Name" in text
        assert "Restarts" in text
        assert "CrashLoopBackOff" in text
        assert "ctrl+n Switch namespace" in text


# ============================================================================
# Navigation
# ============================================================================


@pytest.mark.unit
class TestPodNavigation:
    """Tests for opening pods and switching namespaces."""

    def test_switch_namespace(self, screen: PodSelectionScreen) -> None:
        """ctrl+n opens the namespace picker even while searching."""
        assert screen.update(KeyPress("ctrl+n")) == PushView(NAMESPACE_SELECTION)

    def test_select_opens_pod_info(self, screen: PodSelectionScreen, state: PodsState) -> None:
        """Selecting a pod remembers it and opens the detail view."""
        screen.update(KeyPress("enter"))  # leave search
        screen.update(KeyPress("down"))

        command = screen.update(KeyPress("enter"))

        assert command == PushView(POD_INFO, reinitialize=True)
        assert state.selected_pod == "web-2"


# ============================================================================
# Deletion
# ============================================================================


@pytest.mark.unit
class TestPodDeletion:
    """Tests for the delete confirmation flow."""

    def open_dialog(self, screen: PodSelectionScreen) -> None:
        screen.update(KeyPress("escape"))
        screen.update(KeyPress("delete"))

    def test_delete_asks_first(self, screen: PodSelectionScreen, backend: MagicMock) -> None:
        """delete opens a confirmation dialog."""
        self.open_dialog(screen)

        assert screen.dialog is not None
        assert "Are you sure you want to delete web-1" in render_text(screen)
        backend.delete_pod.assert_not_called()

    def test_yes_deletes_then_reloads(
        self, screen: PodSelectionScreen, backend: MagicMock
    ) -> None:
        """Yes deletes the pod, drops its row and lists the pods again."""
        self.open_dialog(screen)

        effect = screen.update(KeyPress("enter"))

        assert isinstance(effect, Effect)
        assert effect.operation == "delete_pod"
        event = effect.execute()
        assert event == PodDeleted("web-1")
        backend.delete_pod.assert_called_once_with("shop", "web-1")

        reload = screen.update(event)

        assert screen.dialog is None
        assert screen.table is not None
        assert [row.id for row in screen.table.rows] == ["web-2", "db-1"]
        assert isinstance(reload, Effect)
        assert reload.operation == "list_pods"

    def test_no_keeps_pod(self, screen: PodSelectionScreen, backend: MagicMock) -> None:
        """No closes the dialog without deleting."""
        self.open_dialog(screen)

        assert screen.update(KeyPress("right")) is None
        assert screen.update(KeyPress("enter")) is None

        assert screen.dialog is None
        backend.delete_pod.assert_not_called()

    def test_escape_cancels(self, screen: PodSelectionScreen) -> None:
        """escape closes the dialog."""
        self.open_dialog(screen)
        screen.update(KeyPress("escape"))
        assert screen.dialog is None

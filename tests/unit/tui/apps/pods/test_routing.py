"""Tests for the pods app wiring, driven through the event loop."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kubeui.integrations.kubernetes.exceptions import KubernetesTimeoutError
from kubeui.tui.apps.pods import (
    ERROR_INFO,
    NAMESPACE_SELECTION,
    POD_INFO,
    POD_SELECTION,
    PodsState,
    build_router,
    initial_route,
)
from kubeui.tui.apps.pods.error_info import ErrorInfoScreen
from kubeui.tui.apps.pods.pod_info import PodInfoScreen
from kubeui.tui.apps.pods.pod_selection import PodSelectionScreen
from kubeui.tui.engine.effects import ImmediateScheduler
from kubeui.tui.engine.events import KeyPress
from kubeui.tui.engine.loop import EventLoop


def run(loop: EventLoop, scheduler: ImmediateScheduler) -> None:
    """Feed effect results back until nothing is pending."""
    while scheduler.pending:
        for result in scheduler.drain():
            loop.dispatch(result)


def press(loop: EventLoop, scheduler: ImmediateScheduler, *keys: str) -> None:
    for key in keys:
        loop.dispatch(KeyPress(key))
        run(loop, scheduler)


@pytest.fixture
def scheduler() -> ImmediateScheduler:
    return ImmediateScheduler()


@pytest.fixture
def loop(state: PodsState, scheduler: ImmediateScheduler) -> EventLoop:
    loop = EventLoop(build_router(state), scheduler=scheduler, error_route=ERROR_INFO)
    loop.start()
    run(loop, scheduler)
    return loop


@pytest.mark.unit
class TestInitialRoute:
    """Tests for choosing the starting screen."""

    def test_default_namespace_starts_on_picker(self, state: PodsState) -> None:
        """The "default" namespace asks for a namespace first."""
        state.namespace = "default"
        assert initial_route(state) == NAMESPACE_SELECTION

    def test_other_namespace_starts_on_pods(self, state: PodsState) -> None:
        """Any other namespace goes straight to its pods."""
        assert initial_route(state) == POD_SELECTION
        assert build_router(state).current_name == POD_SELECTION


@pytest.mark.unit
class TestPodsFlow:
    """End-to-end navigation with a fake backend."""

    def test_open_pod_and_return(self, loop: EventLoop, scheduler: ImmediateScheduler) -> None:
        """Selecting a pod shows it; escape returns to the same list."""
        pod_list = loop.router.current
        press(loop, scheduler, "enter", "enter")

        assert loop.router.current_name == POD_INFO
        assert isinstance(loop.router.current, PodInfoScreen)
        assert loop.router.current.detail is not None

        press(loop, scheduler, "escape")

        assert loop.router.current is pod_list

    def test_switch_namespace_returns_to_fresh_list(
        self, loop: EventLoop, scheduler: ImmediateScheduler, backend: MagicMock
    ) -> None:
        """Picking a namespace reloads the pod list for it."""
        press(loop, scheduler, "ctrl+n")
        assert loop.router.current_name == NAMESPACE_SELECTION

        press(loop, scheduler, "down", "down", "enter")

        assert loop.router.current_name == POD_SELECTION
        assert loop.router.history == (POD_SELECTION,)
        backend.list_pods.assert_called_with("kube-system")
        assert loop.router.state.namespace == "kube-system"

    def test_backend_failure_shows_error_screen(
        self, loop: EventLoop, scheduler: ImmediateScheduler, backend: MagicMock
    ) -> None:
        """A timed-out refresh opens the error screen; enter goes back."""
        backend.list_pods.side_effect = KubernetesTimeoutError(timeout_seconds=5)

        press(loop, scheduler, "ctrl+r")

        assert loop.router.current_name == ERROR_INFO
        assert isinstance(loop.router.current, ErrorInfoScreen)
        assert "timed out" in loop.router.current.message

        press(loop, scheduler, "enter")

        assert loop.router.current_name == POD_SELECTION
        assert loop.router.current.loading is False

    def test_pod_list_loads_while_switching_namespace(
        self, state: PodsState, scheduler: ImmediateScheduler
    ) -> None:
        """Pods that arrive after leaving for the namespace picker are kept."""
        loop = EventLoop(build_router(state), scheduler=scheduler, error_route=ERROR_INFO)
        loop.start()
        pod_list = loop.router.current
        loop.dispatch(KeyPress("ctrl+n"))

        run(loop, scheduler)
        assert loop.router.current_name == NAMESPACE_SELECTION
        assert isinstance(pod_list, PodSelectionScreen)
        assert pod_list.table is not None

        press(loop, scheduler, "escape", "escape")

        assert loop.router.current is pod_list
        assert pod_list.loading is False
        assert pod_list.table is not None
        assert [row.id for row in pod_list.table.rows] == ["web-1", "web-2", "db-1"]

"""Pods browser application (``kubeui pods``)."""

from __future__ import annotations

from collections.abc import Mapping

from kubeui.tui.apps.pods.error_info import ErrorInfoScreen
from kubeui.tui.apps.pods.namespace_selection import NamespaceSelectionScreen
from kubeui.tui.apps.pods.pod_info import PodInfoScreen
from kubeui.tui.apps.pods.pod_selection import PodSelectionScreen
from kubeui.tui.apps.pods.state import (
    ERROR_INFO,
    NAMESPACE_SELECTION,
    POD_INFO,
    POD_SELECTION,
    PodsState,
)
from kubeui.tui.engine.router import Router
from kubeui.tui.engine.screen import ScreenFactory


def _error_info(state: PodsState, params: Mapping[str, str]) -> ErrorInfoScreen:
    return ErrorInfoScreen(params.get("message") or state.error, keys=state.keys)


ROUTES: dict[str, ScreenFactory] = {
    NAMESPACE_SELECTION: lambda state, params: NamespaceSelectionScreen(state),
    POD_SELECTION: lambda state, params: PodSelectionScreen(state),
    POD_INFO: lambda state, params: PodInfoScreen(state),
    ERROR_INFO: _error_info,
}


def initial_route(state: PodsState) -> str:
    """Pick a namespace first when the context still points at "default"."""
    if state.namespace == "default":
        return NAMESPACE_SELECTION
    return POD_SELECTION


def build_router(state: PodsState) -> Router:
    return Router(state, ROUTES, initial=initial_route(state))


__all__ = [
    "ERROR_INFO",
    "NAMESPACE_SELECTION",
    "POD_INFO",
    "POD_SELECTION",
    "ROUTES",
    "ErrorInfoScreen",
    "NamespaceSelectionScreen",
    "PodInfoScreen",
    "PodSelectionScreen",
    "PodsState",
    "build_router",
    "initial_route",
]

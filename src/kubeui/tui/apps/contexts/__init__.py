"""Context switcher application (``kubeui cxs``)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kubeui.tui.apps.contexts.screen import ContextSelectionScreen
from kubeui.tui.engine.keys import DEFAULT_GLOBAL_KEYS, GlobalKeys
from kubeui.tui.engine.router import Router

if TYPE_CHECKING:
    from kubeui.integrations.kubernetes.kubeconfig import KubeconfigStore

CONTEXT_SELECTION = "context_selection"


@dataclass
class ContextsState:
    store: KubeconfigStore
    page_size: int = 10
    keys: GlobalKeys = DEFAULT_GLOBAL_KEYS


def _context_selection(state: ContextsState, params: Mapping[str, str]) -> ContextSelectionScreen:
    return ContextSelectionScreen(state.store, page_size=state.page_size, keys=state.keys)


def build_router(state: ContextsState) -> Router:
    """Router for the context switcher, starting on the context list."""
    return Router(state, {CONTEXT_SELECTION: _context_selection}, initial=CONTEXT_SELECTION)


__all__ = ["CONTEXT_SELECTION", "ContextSelectionScreen", "ContextsState", "build_router"]

"""State shared by every screen of the pods browser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.text import Text

from kubeui.tui.engine.keys import DEFAULT_GLOBAL_KEYS, GlobalKeys, binding

if TYPE_CHECKING:
    from kubeui.integrations.kubernetes.kubeconfig import KubeconfigStore
    from kubeui.services.kubernetes.backend import KubeBackend
    from kubeui.tui.theme import Theme

NAMESPACE_SELECTION = "namespace_selection"
POD_SELECTION = "pod_selection"
POD_INFO = "pod_info"
ERROR_INFO = "error_info"

SWITCH_NAMESPACE = binding("ctrl+n", description="Switch namespace")


@dataclass
class PodsState:
    """Mutable state the pods screens read and write.

    Attributes:
        backend: Kubernetes API facade.
        store: Kubeconfig store used to persist the chosen namespace.
        context: Active kubeconfig context.
        namespace: Namespace whose pods are browsed.
        selected_pod: Pod shown by the info screen.
        error: Last collaborator failure message.
        width: Terminal width from the latest resize.
        height: Terminal height from the latest resize.
        page_size: Rows per page in list screens.
        keys: Global key bindings.
    """

    backend: KubeBackend
    store: KubeconfigStore
    context: str
    namespace: str
    selected_pod: str = ""
    error: str = ""
    width: int = 80
    height: int = 24
    page_size: int = 10
    keys: GlobalKeys = DEFAULT_GLOBAL_KEYS

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def status_bar(self, theme: Theme) -> Text:
        return Text(f"Context: {self.context}  Namespace: {self.namespace}", style=theme.status_bar)

"""Backend facade used by the pods views.

Combines the namespace and pod managers behind the four calls the views
need and retries transient connection failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kubeui.services.kubernetes.namespace_manager import NamespaceManager
from kubeui.services.kubernetes.pod_manager import PodManager

if TYPE_CHECKING:
    from kubeui.integrations.kubernetes.client import KubernetesClient
    from kubeui.integrations.kubernetes.models import PodDetail, PodSummary


class KubeBackend:
    """Cluster queries and mutations for the pods app.

    Every call is bounded by the client's request timeout and raises a
    ``KubernetesError`` on failure.
    """

    def __init__(self, client: KubernetesClient) -> None:
        self._namespaces = NamespaceManager(client)
        self._pods = PodManager(client)
        self._retry = client.make_retry_decorator()

    def list_namespaces(self) -> list[str]:
        namespaces = self._retry(self._namespaces.list_namespaces)()
        return [ns.name for ns in namespaces]

    def list_pods(self, namespace: str) -> list[PodSummary]:
        return self._retry(self._pods.list_pods)(namespace)

    def get_pod(self, namespace: str, name: str) -> PodDetail:
        return self._retry(self._pods.get_pod)(name, namespace)

    def delete_pod(self, namespace: str, name: str) -> str:
        return self._pods.delete_pod(name, namespace)

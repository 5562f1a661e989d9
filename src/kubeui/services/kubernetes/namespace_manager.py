"""Namespace operations."""

from __future__ import annotations

from kubeui.integrations.kubernetes.models import NamespaceSummary
from kubeui.services.kubernetes.base import K8sBaseManager


class NamespaceManager(K8sBaseManager):
    """Lists the namespaces visible to the current context."""

    _entity_name = "namespace"

    def list_namespaces(self) -> list[NamespaceSummary]:
        """List all namespaces.

        Returns:
            List of namespace summaries in API order.
        """
        self._log.debug("listing_namespaces")
        try:
            result = self._client.core_v1.list_namespace(**self._bounded())
            items = [NamespaceSummary.from_k8s_object(ns) for ns in result.items]
            self._log.debug("listed_namespaces", count=len(items))
            return items
        except Exception as e:
            self._handle_api_error(e, "Namespace", None, None)

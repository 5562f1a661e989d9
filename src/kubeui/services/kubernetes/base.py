"""Base manager for Kubernetes service managers.

Provides shared infrastructure for the resource managers: client access,
request time bounds and error translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

import structlog

if TYPE_CHECKING:
    from kubeui.integrations.kubernetes.client import KubernetesClient

logger = structlog.get_logger()


class K8sBaseManager:
    """Base class for Kubernetes service managers.

    Subclasses set ``_entity_name`` for structured log context.

    Example:
        >>> class PodManager(K8sBaseManager):
        ...     _entity_name = "pod"
    """

    _entity_name: str = ""

    def __init__(self, client: KubernetesClient) -> None:
        """Initialize the manager.

        Args:
            client: Kubernetes API client instance.
        """
        self._client = client
        self._log = logger.bind(entity=self._entity_name)

    def _bounded(self, timeout: float | None = None) -> dict[str, Any]:
        """Keyword arguments that bound an API call by the configured timeout."""
        return {"_request_timeout": timeout or self._client.timeout}

    def _handle_api_error(
        self,
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> NoReturn:
        """Translate a Kubernetes API exception and re-raise.

        Raises:
            KubernetesError: Always raises an appropriate subclass.
        """
        self._log.warning(
            "api_call_failed",
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
            error=str(e),
        )
        raise self._client.translate_api_exception(
            e,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
            timeout=self._client.timeout,
        ) from e

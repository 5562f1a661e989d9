"""Kubernetes API client wrapper.

Wraps the official kubernetes Python client with explicit kubeconfig
loading, a lazily created CoreV1Api, a request timeout and consistent
error translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from kubeui.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
    KubernetesValidationError,
)

if TYPE_CHECKING:
    from kubernetes.client import ApiClient, CoreV1Api

    from kubeui.config import KubeUIConfig

logger = structlog.get_logger()


class KubernetesClient:
    """Kubernetes API client bound to one kubeconfig context.

    The API client is built from its own Configuration object instead of the
    process-wide default, so switching contexts later never leaks into
    clients that already exist.

    Example:
        ```python
        from kubeui.config import KubeUIConfig
        from kubeui.integrations.kubernetes import KubernetesClient

        with KubernetesClient(KubeUIConfig.from_env()) as client:
            pods = client.core_v1.list_namespaced_pod("default")
        ```
    """

    def __init__(self, config: KubeUIConfig, retry_attempts: int = 2) -> None:
        """Initialize the client and load kubeconfig.

        Args:
            config: Runtime configuration (kubeconfig path, context, timeouts).
            retry_attempts: Attempts for transient connection failures.

        Raises:
            KubernetesConnectionError: If no usable configuration can be loaded.
        """
        self._config = config
        self._retries = retry_attempts
        self._current_context: str | None = None
        self._api_client: ApiClient | None = None
        self._core_v1: CoreV1Api | None = None

        self._load_config(config.context)

        logger.info(
            "kubernetes_client_initialized",
            context=self._current_context,
            kubeconfig=config.kubeconfig,
        )

    def _load_config(self, context: str | None) -> None:
        """Build an ApiClient from kubeconfig or in-cluster settings."""
        from kubernetes import client, config
        from kubernetes.config import ConfigException

        configuration = client.Configuration()
        try:
            config.load_kube_config(
                config_file=self._config.kubeconfig,
                context=context,
                client_configuration=configuration,
            )
            self._current_context = context or self._active_context_name()
            logger.debug("loaded_kubeconfig", context=self._current_context)
        except (ConfigException, OSError) as e:
            if self._config.kubeconfig:
                raise KubernetesConnectionError(
                    message=f"Cannot load kubeconfig '{self._config.kubeconfig}': {e}",
                    original_error=e,
                ) from e
            try:
                config.load_incluster_config(client_configuration=configuration)
                self._current_context = "in-cluster"
                logger.debug("loaded_incluster_config")
            except ConfigException as incluster_error:
                raise KubernetesConnectionError(
                    message="Cannot load Kubernetes configuration. "
                    "Ensure kubeconfig exists or running inside a cluster.",
                    original_error=incluster_error,
                ) from incluster_error

        self._api_client = client.ApiClient(configuration)
        self._core_v1 = None

    def _active_context_name(self) -> str | None:
        from kubernetes import config

        _, active = config.list_kube_config_contexts(config_file=self._config.kubeconfig)
        return active.get("name") if active else None

    @property
    def core_v1(self) -> CoreV1Api:
        """Get CoreV1Api instance (pods, namespaces, events, logs)."""
        if self._core_v1 is None:
            from kubernetes.client import CoreV1Api

            self._core_v1 = CoreV1Api(self._api_client)
        return self._core_v1

    # =========================================================================
    # Error Translation
    # =========================================================================

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
        timeout: float | None = None,
    ) -> KubernetesError:
        """Translate a kubernetes ApiException or transport error to a KubernetesError.

        Args:
            e: The original exception.
            resource_type: Type of resource being operated on.
            resource_name: Name of the resource.
            namespace: Namespace of the resource.
            timeout: The request timeout, reported when the call timed out.

        Returns:
            An appropriate KubernetesError subclass.
        """
        from kubernetes.client import ApiException
        from urllib3.exceptions import HTTPError
        from urllib3.exceptions import TimeoutError as TransportTimeoutError

        if isinstance(e, KubernetesError):
            return e

        if isinstance(e, TransportTimeoutError) or isinstance(
            getattr(e, "reason", None), TransportTimeoutError
        ):
            return KubernetesTimeoutError(timeout_seconds=timeout)

        if isinstance(e, HTTPError):
            return KubernetesConnectionError(message=str(e), original_error=e)

        if not isinstance(e, ApiException):
            return KubernetesError(
                message=str(e),
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        status = e.status

        if status in (401, 403):
            return KubernetesAuthError(
                message=e.reason or "Authentication/authorization failed",
                status_code=status,
                reason=e.reason,
            )

        if status == 404:
            return KubernetesNotFoundError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status == 409:
            return KubernetesConflictError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status in (400, 422):
            return KubernetesValidationError(
                message=e.reason or "Validation failed",
                status_code=status,
            )

        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {status}",
            status_code=status,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )

    def make_retry_decorator(self) -> Any:
        """Create a retry decorator for transient connection errors."""
        return retry(
            retry=retry_if_exception_type(KubernetesConnectionError),
            stop=stop_after_attempt(max(self._retries, 1)),
            wait=wait_exponential(multiplier=0.2, min=0.2, max=1),
            reraise=True,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def timeout(self) -> float:
        """Per-request timeout in seconds."""
        return self._config.request_timeout

    @property
    def log_timeout(self) -> float:
        return self._config.log_timeout

    @property
    def log_tail_lines(self) -> int:
        return self._config.log_tail_lines

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the client and release pooled connections."""
        if self._api_client is not None:
            self._api_client.close()
        self._api_client = None
        self._core_v1 = None
        logger.debug("kubernetes_client_closed")

    def __enter__(self) -> KubernetesClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

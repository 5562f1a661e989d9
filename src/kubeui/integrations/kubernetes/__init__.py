"""Kubernetes integration: API client, kubeconfig store and display models."""

from kubeui.integrations.kubernetes.client import KubernetesClient
from kubeui.integrations.kubernetes.exceptions import (
    KubeconfigError,
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
    KubernetesValidationError,
)
from kubeui.integrations.kubernetes.kubeconfig import KubeconfigStore

__all__ = [
    "KubeconfigError",
    "KubeconfigStore",
    "KubernetesAuthError",
    "KubernetesClient",
    "KubernetesConflictError",
    "KubernetesConnectionError",
    "KubernetesError",
    "KubernetesNotFoundError",
    "KubernetesTimeoutError",
    "KubernetesValidationError",
]

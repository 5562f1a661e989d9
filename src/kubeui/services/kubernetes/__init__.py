"""Kubernetes service layer."""

from kubeui.services.kubernetes.backend import KubeBackend
from kubeui.services.kubernetes.namespace_manager import NamespaceManager
from kubeui.services.kubernetes.pod_manager import PodManager

__all__ = ["KubeBackend", "NamespaceManager", "PodManager"]

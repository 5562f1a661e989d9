"""Display models for Kubernetes resources."""

from kubeui.integrations.kubernetes.models.base import K8sEntityBase
from kubeui.integrations.kubernetes.models.cluster import EventSummary, NamespaceSummary
from kubeui.integrations.kubernetes.models.pods import PodDetail, PodSummary

__all__ = [
    "EventSummary",
    "K8sEntityBase",
    "NamespaceSummary",
    "PodDetail",
    "PodSummary",
]

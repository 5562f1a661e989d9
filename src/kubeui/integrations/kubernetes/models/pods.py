"""Pod display models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from kubeui.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _get_annotations,
    _get_labels,
    _get_timestamp,
    _safe_get,
)
from kubeui.integrations.kubernetes.models.cluster import EventSummary
from kubeui.integrations.kubernetes.models.formatting import format_pod


class PodSummary(K8sEntityBase):
    """Pod display model carrying the kubectl list columns."""

    _entity_name: ClassVar[str] = "pod"

    phase: str = Field(default="Unknown", description="Pod phase")
    node_name: str | None = Field(default=None, description="Node the pod is running on")
    pod_ip: str | None = Field(default=None, description="Pod IP address")
    ready: str = Field(default="0/0", description="Ready containers out of total")
    status: str = Field(default="Unknown", description="kubectl STATUS column")
    restarts: str = Field(default="0", description="kubectl RESTARTS column")
    age: str = Field(default="<unknown>", description="kubectl AGE column")
    containers: list[str] = Field(default_factory=list, description="Container names")

    @classmethod
    def from_k8s_object(cls, obj: Any, now: datetime | None = None) -> PodSummary:
        """Create from a kubernetes V1Pod object."""
        formatted = format_pod(obj, now)
        containers = _safe_get(obj, "spec", "containers") or _safe_get(
            obj, "status", "container_statuses", default=[]
        )
        return cls(
            name=formatted.name,
            namespace=_safe_get(obj, "metadata", "namespace"),
            uid=_safe_get(obj, "metadata", "uid"),
            creation_timestamp=_get_timestamp(_safe_get(obj, "metadata", "creation_timestamp")),
            labels=_get_labels(obj),
            annotations=_get_annotations(obj),
            phase=_safe_get(obj, "status", "phase", default="Unknown"),
            node_name=_safe_get(obj, "spec", "node_name"),
            pod_ip=_safe_get(obj, "status", "pod_ip"),
            ready=formatted.ready,
            status=formatted.status,
            restarts=formatted.restarts,
            age=formatted.age,
            containers=[getattr(c, "name", "") for c in containers],
        )

    @property
    def display_values(self) -> list[str]:
        """Values in NAME, READY, STATUS, RESTARTS, AGE order."""
        return [self.name, self.ready, self.status, self.restarts, self.age]


class PodDetail(BaseModel):
    """A pod together with its recent events and per-container log tails."""

    model_config = ConfigDict(extra="ignore")

    pod: PodSummary
    events: list[EventSummary] = Field(default_factory=list)
    logs: dict[str, str] = Field(default_factory=dict)

    @property
    def container_names(self) -> list[str]:
        return list(self.pod.containers)

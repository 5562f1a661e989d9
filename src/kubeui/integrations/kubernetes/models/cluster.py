"""Namespace and event display models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from kubeui.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _get_annotations,
    _get_labels,
    _get_timestamp,
    _safe_get,
)
from kubeui.integrations.kubernetes.models.formatting import format_event


class NamespaceSummary(K8sEntityBase):
    """Namespace display model."""

    _entity_name: ClassVar[str] = "namespace"

    status: str = Field(default="Active", description="Namespace phase")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> NamespaceSummary:
        """Create from a kubernetes V1Namespace object."""
        return cls(
            name=_safe_get(obj, "metadata", "name", default=""),
            uid=_safe_get(obj, "metadata", "uid"),
            creation_timestamp=_get_timestamp(_safe_get(obj, "metadata", "creation_timestamp")),
            labels=_get_labels(obj),
            annotations=_get_annotations(obj),
            status=_safe_get(obj, "status", "phase", default="Active"),
        )


class EventSummary(K8sEntityBase):
    """Event display model with kubectl-style age."""

    _entity_name: ClassVar[str] = "event"

    type: str = Field(default="", description="Event type (Normal/Warning)")
    reason: str = Field(default="", description="Event reason")
    age: str = Field(default="<unknown>", description="Time since the last occurrence")
    source: str = Field(default="", description="Reporting component")
    message: str = Field(default="", description="Event message")

    @classmethod
    def from_k8s_object(cls, obj: Any, now: datetime | None = None) -> EventSummary:
        """Create from a kubernetes CoreV1Event object."""
        formatted = format_event(obj, now)
        return cls(
            name=_safe_get(obj, "metadata", "name", default=""),
            namespace=_safe_get(obj, "metadata", "namespace"),
            uid=_safe_get(obj, "metadata", "uid"),
            creation_timestamp=_get_timestamp(_safe_get(obj, "metadata", "creation_timestamp")),
            type=formatted.type,
            reason=formatted.reason,
            age=formatted.age,
            source=formatted.source,
            message=formatted.message,
        )

    @property
    def display_values(self) -> list[str]:
        return [self.type, self.reason, self.age, self.source, self.message]

"""Base models for Kubernetes resource display."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class K8sEntityBase(BaseModel):
    """Base class for all Kubernetes display models."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(description="Resource name")
    namespace: str | None = Field(default=None, description="Resource namespace")
    uid: str | None = Field(default=None, description="Kubernetes UID")
    creation_timestamp: str | None = Field(default=None, description="Creation time")
    labels: dict[str, str] = Field(default_factory=dict, description="Resource labels")
    annotations: dict[str, str] = Field(default_factory=dict, description="Resource annotations")

    _entity_name: ClassVar[str] = "entity"


def _safe_get(obj: Any, *attrs: str, default: Any = None) -> Any:
    """Safely traverse nested attributes on kubernetes SDK objects."""
    current = obj
    for attr in attrs:
        if current is None:
            return default
        current = getattr(current, attr, None)
    return current if current is not None else default


def _get_timestamp(obj: Any) -> str | None:
    """Extract ISO timestamp string from a datetime or string."""
    if obj is None:
        return None
    if isinstance(obj, str):
        return obj
    if isinstance(obj, datetime):
        return obj.isoformat()
    return str(obj)


def _get_labels(obj: Any) -> dict[str, str]:
    labels = _safe_get(obj, "metadata", "labels")
    return dict(labels) if labels else {}


def _get_annotations(obj: Any) -> dict[str, str]:
    annotations = _safe_get(obj, "metadata", "annotations")
    return dict(annotations) if annotations else {}

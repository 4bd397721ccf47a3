"""Base models for printer-side views of Kubernetes objects."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

EPOCH = datetime.fromtimestamp(0, tz=UTC)


class K8sEntityBase(BaseModel):
    """Common metadata extracted from a kubernetes SDK object."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    name: str = Field(default="", description="Resource name")
    namespace: str | None = Field(default=None, description="Resource namespace")
    creation_timestamp: datetime | None = Field(default=None, description="Creation time")
    labels: dict[str, str] = Field(default_factory=dict, description="Resource labels")

    @property
    def created(self) -> datetime:
        """Creation time, or the epoch when the object carries none."""
        return self.creation_timestamp or EPOCH

    @classmethod
    def metadata_fields(cls, obj: Any) -> dict[str, Any]:
        """Metadata keyword arguments shared by every ``from_k8s_object``."""
        return {
            "name": _safe_get(obj, "metadata", "name", default=""),
            "namespace": _safe_get(obj, "metadata", "namespace"),
            "creation_timestamp": _get_timestamp(
                _safe_get(obj, "metadata", "creation_timestamp")
            ),
            "labels": _get_labels(obj),
        }


def _safe_get(obj: Any, *attrs: str, default: Any = None) -> Any:
    """Safely traverse nested attributes on kubernetes SDK objects."""
    current = obj
    for attr in attrs:
        if current is None:
            return default
        current = getattr(current, attr, None)
    return current if current is not None else default


def _get_timestamp(obj: Any) -> datetime | None:
    """Return a datetime from a datetime or ISO string."""
    if obj is None:
        return None
    if isinstance(obj, datetime):
        return obj
    try:
        return datetime.fromisoformat(str(obj).replace("Z", "+00:00"))
    except ValueError:
        return None


def _get_labels(obj: Any) -> dict[str, str]:
    """Extract labels dict, empty when unset."""
    labels = _safe_get(obj, "metadata", "labels")
    return dict(labels) if labels else {}

"""Printer-side views of workload objects."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from overview_printer.models.base import K8sEntityBase, _get_timestamp, _safe_get


class ContainerImage(BaseModel):
    """Name/image pair from a pod template."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    image: str = ""


class PodSummary(K8sEntityBase):
    """Pod row data. Missing status fields fall back to zero values."""

    phase: str = Field(default="", description="Pod phase")
    node_name: str = Field(default="", description="Node the pod is scheduled on")
    restarts: int = Field(default=0, description="Total container restarts")
    ready_count: int = Field(default=0, description="Number of ready containers")
    total_count: int = Field(default=0, description="Number of containers in the spec")

    @property
    def ready(self) -> str:
        """Ready fraction, e.g. ``"1/2"``."""
        return f"{self.ready_count}/{self.total_count}"

    @classmethod
    def from_k8s_object(cls, obj: Any) -> PodSummary:
        """Create from a kubernetes V1Pod object."""
        container_statuses = _safe_get(obj, "status", "container_statuses") or []
        restarts = sum(getattr(cs, "restart_count", 0) or 0 for cs in container_statuses)
        ready_count = sum(1 for cs in container_statuses if getattr(cs, "ready", False))
        spec_containers = _safe_get(obj, "spec", "containers") or []

        return cls(
            **cls.metadata_fields(obj),
            phase=_safe_get(obj, "status", "phase", default=""),
            node_name=_safe_get(obj, "spec", "node_name", default=""),
            restarts=restarts,
            ready_count=ready_count,
            total_count=len(spec_containers),
        )


class WorkloadSummary(K8sEntityBase):
    """Replica-managing workload (Deployment, ReplicaSet) list data."""

    spec_replicas: int | None = Field(default=None, description="Desired replicas from spec")
    replicas: int = Field(default=0, description="Observed replicas")
    available_replicas: int = Field(default=0, description="Available replicas")
    containers: list[ContainerImage] = Field(
        default_factory=list, description="Pod template containers"
    )
    template_labels: dict[str, str] = Field(
        default_factory=dict, description="Pod template labels"
    )

    @property
    def desired_replicas(self) -> int:
        """Spec replica count when set, otherwise the observed count."""
        return self.spec_replicas if self.spec_replicas is not None else self.replicas

    @property
    def status_fraction(self) -> str:
        """``"<available>/<desired>"``."""
        return f"{self.available_replicas}/{self.desired_replicas}"

    @classmethod
    def from_k8s_object(cls, obj: Any) -> WorkloadSummary:
        """Create from a kubernetes V1Deployment or V1ReplicaSet object."""
        containers = _safe_get(obj, "spec", "template", "spec", "containers") or []
        template_labels = _safe_get(obj, "spec", "template", "metadata", "labels")
        return cls(
            **cls.metadata_fields(obj),
            spec_replicas=_safe_get(obj, "spec", "replicas"),
            replicas=_safe_get(obj, "status", "replicas", default=0),
            available_replicas=_safe_get(obj, "status", "available_replicas", default=0),
            containers=[
                ContainerImage(name=c.name or "", image=c.image or "") for c in containers
            ],
            template_labels=dict(template_labels) if template_labels else {},
        )


class ConditionSummary(BaseModel):
    """Status condition row data."""

    model_config = ConfigDict(extra="ignore")

    type: str = ""
    reason: str = ""
    status: str = ""
    message: str = ""
    last_update_time: datetime | None = None
    last_transition_time: datetime | None = None

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ConditionSummary:
        """Create from a V1DeploymentCondition or V1ReplicaSetCondition."""
        return cls(
            type=getattr(obj, "type", "") or "",
            reason=getattr(obj, "reason", "") or "",
            status=getattr(obj, "status", "") or "",
            message=getattr(obj, "message", "") or "",
            last_update_time=_get_timestamp(getattr(obj, "last_update_time", None)),
            last_transition_time=_get_timestamp(getattr(obj, "last_transition_time", None)),
        )

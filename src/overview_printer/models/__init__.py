"""Printer-side views of Kubernetes objects."""

from overview_printer.models.base import EPOCH, K8sEntityBase
from overview_printer.models.workloads import (
    ConditionSummary,
    ContainerImage,
    PodSummary,
    WorkloadSummary,
)

__all__ = [
    "EPOCH",
    "ConditionSummary",
    "ContainerImage",
    "K8sEntityBase",
    "PodSummary",
    "WorkloadSummary",
]

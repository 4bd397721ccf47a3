"""ReplicaSet printers."""

from __future__ import annotations

from typing import Any, ClassVar

import structlog

from overview_printer.component import (
    WIDTH_FULL,
    WIDTH_HALF,
    Action,
    Component,
    FlexLayout,
    FlexLayoutItem,
    Quadrant,
    QuadrantPosition,
    Summary,
    Table,
    Text,
)
from overview_printer.exceptions import InvalidArgumentError
from overview_printer.models import WorkloadSummary
from overview_printer.models.base import _safe_get
from overview_printer.printer.actions import edit_replicas_action
from overview_printer.printer.base import KindPrinter
from overview_printer.printer.common import (
    conditions_table,
    containers_component,
    labels_component,
    name_link,
    print_selector,
    timestamp_component,
)
from overview_printer.printer.options import PrintOptions
from overview_printer.printer.pods import count_pod_phases, list_pods, pods_table, related_pods
from overview_printer.printer.summary import (
    ActionGenerator,
    ConfigurationSummarizer,
    SelectorGenerator,
    SpecIntGenerator,
)

logger = structlog.get_logger()

REPLICA_SET_COLUMNS = ["Name", "Labels", "Status", "Age", "Containers", "Selector"]


def replica_set_list_handler(replica_sets: Any, options: PrintOptions) -> Table:
    """Render a V1ReplicaSetList.

    Raises:
        InvalidArgumentError: If the list or any item is None.
    """
    if replica_sets is None:
        raise InvalidArgumentError("replica set list is nil")
    items = replica_sets.items or []
    if any(item is None for item in items):
        raise InvalidArgumentError("replica set list contains a nil replica set")

    table = Table(title="ReplicaSets", columns=REPLICA_SET_COLUMNS)
    for replica_set in items:
        summary = WorkloadSummary.from_k8s_object(replica_set)
        table.add(
            {
                "Name": name_link(replica_set, summary, options),
                "Labels": labels_component(summary),
                "Status": Text(value=summary.status_fraction),
                "Age": timestamp_component(summary),
                "Containers": containers_component(summary.containers),
                "Selector": print_selector(_safe_get(replica_set, "spec", "selector")),
            }
        )
    return table


class ReplicaStatusGenerator(ActionGenerator):
    header = "Replica Status"

    def content(self, resource: Any) -> Component | None:
        summary = WorkloadSummary.from_k8s_object(resource)
        return Text(value=f"Current {summary.replicas} / Desired {summary.desired_replicas}")


class ReplicaSetConfiguration(ConfigurationSummarizer):
    """Configuration summary for a ReplicaSet."""

    resource_type: ClassVar[str] = "ReplicaSet"
    default_generators: ClassVar[tuple[ActionGenerator, ...]] = (
        ReplicaStatusGenerator(),
        SelectorGenerator(),
        SpecIntGenerator("Min Ready Seconds", "min_ready_seconds", default=0),
        SpecIntGenerator("Replicas", "replicas"),
    )


class ReplicaSetStatus:
    """Owned pods counted by phase.

    ``pods`` skips the store query when the caller has already listed them.
    """

    def __init__(
        self, replica_set: Any, options: PrintOptions, pods: list[Any] | None = None
    ) -> None:
        self._replica_set = replica_set
        self._options = options
        self._pods = pods

    def create(self) -> Quadrant:
        """Build the quadrant from a pod query.

        Raises:
            InvalidArgumentError: If the replica set is None.
            UpstreamError: If the pod query fails.
        """
        if self._replica_set is None:
            raise InvalidArgumentError("replica set is nil")

        pods = self._pods
        if pods is None:
            pods = _owned_pods(self._replica_set, self._options)
        counts = count_pod_phases(pods)

        quadrant = Quadrant(title="Status")
        quadrant.set(QuadrantPosition.NW, "Running", str(counts["Running"]))
        quadrant.set(QuadrantPosition.NE, "Waiting", str(counts["Pending"]))
        quadrant.set(QuadrantPosition.SW, "Succeeded", str(counts["Succeeded"]))
        quadrant.set(QuadrantPosition.SE, "Failed", str(counts["Failed"]))
        return quadrant


def _owned_pods(replica_set: Any, options: PrintOptions) -> list[Any]:
    summary = WorkloadSummary.from_k8s_object(replica_set)
    if not summary.template_labels:
        return []
    return list_pods(summary.namespace, summary.template_labels, options)


def replica_set_pods(replica_set: Any, options: PrintOptions) -> Table:
    """Pods selected by the replica set's pod template labels."""
    if replica_set is None:
        raise InvalidArgumentError("replica set is nil")
    summary = WorkloadSummary.from_k8s_object(replica_set)
    return related_pods(summary.namespace, summary.template_labels, options)


def edit_replica_set_action(replica_set: Any) -> list[Action]:
    """Edit form for the replica set's replica count."""
    return edit_replicas_action(
        replica_set,
        kind=ReplicaSetPrinter.kind,
        api_version=ReplicaSetPrinter.api_version,
        action="replicaset/configuration",
    )


def replica_set_handler(replica_set: Any, options: PrintOptions) -> FlexLayout:
    """Detail view: configuration and status, pods, conditions, edit action."""
    if replica_set is None:
        raise InvalidArgumentError("replica set is nil")
    name = _safe_get(replica_set, "metadata", "name", default="")
    logger.debug("printing_replica_set", name=name, request_id=options.context.request_id)

    layout = FlexLayout(title=name, button_group=edit_replica_set_action(replica_set))
    configuration = ReplicaSetConfiguration(replica_set).create()
    # status and pods table share one snapshot
    pods = _owned_pods(replica_set, options)
    layout.add_section(
        FlexLayoutItem(width=WIDTH_HALF, view=configuration),
        FlexLayoutItem(
            width=WIDTH_HALF, view=ReplicaSetStatus(replica_set, options, pods=pods).create()
        ),
    )
    layout.add_section(FlexLayoutItem(width=WIDTH_FULL, view=pods_table(pods, options)))

    conditions = _safe_get(replica_set, "status", "conditions") or []
    if conditions:
        layout.add_section(FlexLayoutItem(width=WIDTH_FULL, view=conditions_table(conditions)))
    return layout


class ReplicaSetPrinter(KindPrinter):
    """Registry entry for ``apps/v1`` ReplicaSets."""

    kind: ClassVar[str] = "ReplicaSet"
    api_version: ClassVar[str] = "apps/v1"
    model: ClassVar[str] = "V1ReplicaSet"

    def list_handler(self, objects: Any, options: PrintOptions) -> Table:
        return replica_set_list_handler(objects, options)

    def object_handler(self, obj: Any, options: PrintOptions) -> Component:
        return replica_set_handler(obj, options)

    def configuration(self, obj: Any) -> Summary:
        return ReplicaSetConfiguration(obj).create()

    def status(self, obj: Any, options: PrintOptions) -> Component:
        return ReplicaSetStatus(obj, options).create()

    def actions(self, obj: Any) -> list[Action]:
        return edit_replica_set_action(obj)

"""Deployment printers.

Renders Deployments as list tables, configuration summaries, status
quadrants, related pod tables, edit actions and the combined detail layout.
"""

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
    format_int_or_string,
    labels_component,
    name_link,
    print_selector,
    timestamp_component,
)
from overview_printer.printer.options import PrintOptions
from overview_printer.printer.pods import related_pods
from overview_printer.printer.summary import (
    ActionGenerator,
    ConfigurationSummarizer,
    SelectorGenerator,
    SpecIntGenerator,
)

logger = structlog.get_logger()

DEPLOYMENT_COLUMNS = ["Name", "Labels", "Status", "Age", "Containers", "Selector"]
ROLLING_UPDATE = "RollingUpdate"


def deployment_list_handler(deployments: Any, options: PrintOptions) -> Table:
    """Render a V1DeploymentList.

    Raises:
        InvalidArgumentError: If the list or any item is None.
    """
    if deployments is None:
        raise InvalidArgumentError("deployment list is nil")
    items = deployments.items or []
    if any(item is None for item in items):
        raise InvalidArgumentError("deployment list contains a nil deployment")

    table = Table(title="Deployments", columns=DEPLOYMENT_COLUMNS)
    for deployment in items:
        summary = WorkloadSummary.from_k8s_object(deployment)
        table.add(
            {
                "Name": name_link(deployment, summary, options),
                "Labels": labels_component(summary),
                "Status": Text(value=summary.status_fraction),
                "Age": timestamp_component(summary),
                "Containers": containers_component(summary.containers),
                "Selector": print_selector(_safe_get(deployment, "spec", "selector")),
            }
        )
    logger.debug("printed_deployment_list", count=len(items))
    return table


class StrategyTypeGenerator(ActionGenerator):
    header = "Deployment Strategy"

    def content(self, resource: Any) -> Component | None:
        strategy_type = _safe_get(resource, "spec", "strategy", "type")
        return Text(value=strategy_type) if strategy_type else None


class RollingUpdateGenerator(ActionGenerator):
    """Surge/unavailable settings, only for the RollingUpdate strategy."""

    header = "Rolling Update Strategy"

    def content(self, resource: Any) -> Component | None:
        strategy = _safe_get(resource, "spec", "strategy")
        if _safe_get(strategy, "type") != ROLLING_UPDATE:
            return None
        rolling_update = _safe_get(strategy, "rolling_update")
        if rolling_update is None:
            return None
        max_surge = format_int_or_string(rolling_update.max_surge)
        max_unavailable = format_int_or_string(rolling_update.max_unavailable)
        return Text(value=f"Max Surge {max_surge}, Max Unavailable {max_unavailable}")


class DeploymentConfiguration(ConfigurationSummarizer):
    """Configuration summary for a Deployment."""

    resource_type: ClassVar[str] = "Deployment"
    default_generators: ClassVar[tuple[ActionGenerator, ...]] = (
        StrategyTypeGenerator(),
        RollingUpdateGenerator(),
        SelectorGenerator(),
        SpecIntGenerator("Min Ready Seconds", "min_ready_seconds", default=0),
        SpecIntGenerator("Revision History Limit", "revision_history_limit"),
        SpecIntGenerator("Replicas", "replicas"),
    )


class DeploymentStatus:
    """Four-field status snapshot, taken verbatim from ``status``."""

    def __init__(self, deployment: Any) -> None:
        self._deployment = deployment

    def create(self) -> Quadrant:
        """Build the quadrant.

        Raises:
            InvalidArgumentError: If the deployment is None.
        """
        if self._deployment is None:
            raise InvalidArgumentError("deployment is nil")

        status = getattr(self._deployment, "status", None)

        def field(name: str) -> str:
            return str(_safe_get(status, name, default=0))

        quadrant = Quadrant(title="Status")
        quadrant.set(QuadrantPosition.NW, "Updated", field("updated_replicas"))
        quadrant.set(QuadrantPosition.NE, "Total", field("replicas"))
        quadrant.set(QuadrantPosition.SW, "Unavailable", field("unavailable_replicas"))
        quadrant.set(QuadrantPosition.SE, "Available", field("available_replicas"))
        return quadrant


def deployment_pods(deployment: Any, options: PrintOptions) -> Table:
    """Pods selected by the deployment's pod template labels."""
    if deployment is None:
        raise InvalidArgumentError("deployment is nil")
    summary = WorkloadSummary.from_k8s_object(deployment)
    return related_pods(summary.namespace, summary.template_labels, options)


def edit_deployment_action(deployment: Any) -> list[Action]:
    """Edit form for the deployment's replica count."""
    return edit_replicas_action(
        deployment,
        kind=DeploymentPrinter.kind,
        api_version=DeploymentPrinter.api_version,
        action="deployment/configuration",
    )


def deployment_handler(deployment: Any, options: PrintOptions) -> FlexLayout:
    """Detail view: configuration and status, pods, conditions, edit action.

    Raises:
        InvalidArgumentError: If the deployment is None.
    """
    if deployment is None:
        raise InvalidArgumentError("deployment is nil")
    summary = WorkloadSummary.from_k8s_object(deployment)
    log = logger.bind(
        kind="Deployment",
        name=summary.name,
        namespace=summary.namespace,
        request_id=options.context.request_id,
    )
    log.debug("printing_deployment")

    layout = FlexLayout(title=summary.name, button_group=edit_deployment_action(deployment))
    layout.add_section(
        FlexLayoutItem(width=WIDTH_HALF, view=DeploymentConfiguration(deployment).create()),
        FlexLayoutItem(width=WIDTH_HALF, view=DeploymentStatus(deployment).create()),
    )
    layout.add_section(FlexLayoutItem(width=WIDTH_FULL, view=deployment_pods(deployment, options)))

    conditions = _safe_get(deployment, "status", "conditions") or []
    if conditions:
        layout.add_section(FlexLayoutItem(width=WIDTH_FULL, view=conditions_table(conditions)))
    return layout


class DeploymentPrinter(KindPrinter):
    """Registry entry for ``apps/v1`` Deployments."""

    kind: ClassVar[str] = "Deployment"
    api_version: ClassVar[str] = "apps/v1"
    model: ClassVar[str] = "V1Deployment"

    def list_handler(self, objects: Any, options: PrintOptions) -> Table:
        return deployment_list_handler(objects, options)

    def object_handler(self, obj: Any, options: PrintOptions) -> Component:
        return deployment_handler(obj, options)

    def configuration(self, obj: Any) -> Summary:
        return DeploymentConfiguration(obj).create()

    def status(self, obj: Any, options: PrintOptions) -> Component:
        return DeploymentStatus(obj).create()

    def actions(self, obj: Any) -> list[Action]:
        return edit_deployment_action(obj)

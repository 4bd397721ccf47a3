"""Unit tests for the Deployment printers."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from kubernetes.client import (
    V1DeploymentCondition,
    V1DeploymentList,
    V1DeploymentStatus,
    V1DeploymentStrategy,
    V1LabelSelector,
    V1LabelSelectorRequirement,
    V1RollingUpdateDeployment,
)

from overview_printer.component import (
    Action,
    ContainerDef,
    Containers,
    ExpressionSelector,
    FlexLayout,
    Form,
    FormField,
    Labels,
    LabelSelector,
    Link,
    Operator,
    Quadrant,
    QuadrantPosition,
    Selectors,
    Summary,
    Table,
    Text,
    Timestamp,
)
from overview_printer.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    RenderCancelledError,
    UpstreamError,
)
from overview_printer.printer import (
    DeploymentConfiguration,
    DeploymentPrinter,
    DeploymentStatus,
    PrintOptions,
    deployment_handler,
    deployment_list_handler,
    deployment_pods,
    edit_deployment_action,
)
from overview_printer.printer.conversion import to_unstructured
from overview_printer.printer.deployment import DEPLOYMENT_COLUMNS
from overview_printer.printer.pods import POD_COLUMNS
from overview_printer.store import Key
from tests.builders import CREATED, containers, create_deployment, create_pod


def _configured_deployment():
    deployment = create_deployment()
    deployment.spec.strategy = V1DeploymentStrategy(
        type="RollingUpdate",
        rolling_update=V1RollingUpdateDeployment(max_surge="25%", max_unavailable="25%"),
    )
    deployment.spec.selector = V1LabelSelector(
        match_labels={"app": "my_app"},
        match_expressions=[
            V1LabelSelectorRequirement(key="key", operator="In", values=["value1", "value2"])
        ],
    )
    deployment.spec.revision_history_limit = 5
    deployment.spec.replicas = 3
    return deployment


@pytest.mark.unit
@pytest.mark.kubernetes
class TestDeploymentListHandler:
    """Test deployment_list_handler."""

    def test_renders_row(self, print_options: PrintOptions, link_resolver: MagicMock) -> None:
        """A deployment renders as one row with every column."""
        deployment = create_deployment()
        deployment.metadata.labels = {"foo": "bar"}
        deployment.spec.replicas = 3
        deployment.status = V1DeploymentStatus(replicas=3, available_replicas=2)
        deployment.spec.template.spec.containers = containers(
            ("nginx", "nginx:1.15"), ("kuard", "gcr.io/kuar-demo/kuard-amd64:1")
        )

        got = deployment_list_handler(V1DeploymentList(items=[deployment]), print_options)

        expected = Table(title="Deployments", columns=DEPLOYMENT_COLUMNS)
        expected.add(
            {
                "Name": Link(text="deployment", ref="/path"),
                "Labels": Labels(labels={"foo": "bar"}),
                "Status": Text(value="2/3"),
                "Age": Timestamp(value=CREATED),
                "Containers": Containers(
                    containers=[
                        ContainerDef(name="nginx", image="nginx:1.15"),
                        ContainerDef(name="kuard", image="gcr.io/kuar-demo/kuard-amd64:1"),
                    ]
                ),
                "Selector": Selectors(selectors=[LabelSelector(key="app", value="my_app")]),
            }
        )
        assert got == expected
        link_resolver.path_for.assert_called_once_with(deployment, "deployment")

    def test_columns(self) -> None:
        """Columns are fixed and ordered."""
        assert DEPLOYMENT_COLUMNS == ["Name", "Labels", "Status", "Age", "Containers", "Selector"]

    def test_status_falls_back_to_observed_replicas(self, print_options: PrintOptions) -> None:
        """Without spec.replicas the desired count is status.replicas."""
        deployment = create_deployment()
        deployment.status = V1DeploymentStatus(replicas=4, available_replicas=1)

        got = deployment_list_handler(V1DeploymentList(items=[deployment]), print_options)

        assert got.rows[0]["Status"] == Text(value="1/4")

    def test_empty_list(self, print_options: PrintOptions) -> None:
        """An empty list renders an empty table."""
        got = deployment_list_handler(V1DeploymentList(items=[]), print_options)
        assert got.title == "Deployments"
        assert got.is_empty()

    def test_nil_list(self, print_options: PrintOptions) -> None:
        """A None list is rejected."""
        with pytest.raises(InvalidArgumentError):
            deployment_list_handler(None, print_options)

    def test_nil_item(self, print_options: PrintOptions) -> None:
        """A None item is rejected."""
        deployments = V1DeploymentList(items=[create_deployment()])
        deployments.items.append(None)
        with pytest.raises(InvalidArgumentError):
            deployment_list_handler(deployments, print_options)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestDeploymentConfiguration:
    """Test DeploymentConfiguration."""

    def test_default_generators(self) -> None:
        """Every default section renders in order."""
        got = DeploymentConfiguration(_configured_deployment()).create()

        expected = Summary(title="Configuration")
        expected.add("Deployment Strategy", Text(value="RollingUpdate"))
        expected.add("Rolling Update Strategy", Text(value="Max Surge 25%, Max Unavailable 25%"))
        expected.add(
            "Selectors",
            Selectors(
                selectors=[
                    ExpressionSelector(
                        key="key", operator=Operator.IN, values=["value1", "value2"]
                    ),
                    LabelSelector(key="app", value="my_app"),
                ]
            ),
        )
        expected.add("Min Ready Seconds", Text(value="0"))
        expected.add("Revision History Limit", Text(value="5"))
        expected.add("Replicas", Text(value="3"))
        assert got == expected

    def test_nil_deployment(self) -> None:
        """A None deployment is rejected without a partial summary."""
        with pytest.raises(InvalidArgumentError, match="Deployment is nil"):
            DeploymentConfiguration(None).create()

    def test_empty_generators(self) -> None:
        """No generators yields an empty summary."""
        got = DeploymentConfiguration(_configured_deployment(), action_generators=()).create()
        assert got == Summary(title="Configuration")

    def test_custom_generator_order(self) -> None:
        """Sections follow the order of the given generators."""
        generators = tuple(reversed(DeploymentConfiguration.default_generators))
        got = DeploymentConfiguration(_configured_deployment(), generators).create()
        assert got.headers() == [
            "Replicas",
            "Revision History Limit",
            "Min Ready Seconds",
            "Selectors",
            "Rolling Update Strategy",
            "Deployment Strategy",
        ]

    def test_recreate_strategy_omits_rolling_update(self) -> None:
        """Only RollingUpdate deployments get the rolling update section."""
        deployment = _configured_deployment()
        deployment.spec.strategy = V1DeploymentStrategy(type="Recreate")

        got = DeploymentConfiguration(deployment).create()

        assert "Rolling Update Strategy" not in got.headers()
        assert got.sections[0].content == Text(value="Recreate")

    def test_integer_surge(self) -> None:
        """Integer surge values render as decimals; unset values as 0."""
        deployment = _configured_deployment()
        deployment.spec.strategy.rolling_update = V1RollingUpdateDeployment(max_surge=1)

        got = DeploymentConfiguration(deployment).create()

        assert got.sections[1].content == Text(value="Max Surge 1, Max Unavailable 0")

    def test_malformed_surge(self) -> None:
        """A non-percentage string aborts the summary."""
        deployment = _configured_deployment()
        deployment.spec.strategy.rolling_update = V1RollingUpdateDeployment(
            max_surge="25 percent"
        )

        with pytest.raises(ConfigurationError):
            DeploymentConfiguration(deployment).create()

    def test_unset_optional_fields_are_omitted(self) -> None:
        """Revision history limit and replicas are omitted when unset."""
        got = DeploymentConfiguration(create_deployment()).create()
        assert got.headers() == ["Selectors", "Min Ready Seconds"]

    def test_min_ready_seconds(self) -> None:
        """Min ready seconds renders the configured value."""
        deployment = _configured_deployment()
        deployment.spec.min_ready_seconds = 30

        got = DeploymentConfiguration(deployment).create()

        assert got.sections[3].content == Text(value="30")


@pytest.mark.unit
@pytest.mark.kubernetes
class TestDeploymentStatus:
    """Test DeploymentStatus."""

    def test_quadrant(self) -> None:
        """Cells are taken verbatim from the status fields."""
        deployment = create_deployment()
        deployment.status = V1DeploymentStatus(
            updated_replicas=1, replicas=2, unavailable_replicas=3, available_replicas=4
        )

        got = DeploymentStatus(deployment).create()

        expected = Quadrant(title="Status")
        expected.set(QuadrantPosition.NW, "Updated", "1")
        expected.set(QuadrantPosition.NE, "Total", "2")
        expected.set(QuadrantPosition.SW, "Unavailable", "3")
        expected.set(QuadrantPosition.SE, "Available", "4")
        assert got == expected

    def test_missing_status_renders_zero(self) -> None:
        """Unset status fields render as 0."""
        got = DeploymentStatus(create_deployment()).create()
        assert {cell.value for cell in got.cells.values()} == {"0"}
        assert len(got.cells) == 4

    def test_nil_deployment(self) -> None:
        """A None deployment is rejected."""
        with pytest.raises(InvalidArgumentError):
            DeploymentStatus(None).create()


@pytest.mark.unit
@pytest.mark.kubernetes
class TestDeploymentPods:
    """Test deployment_pods."""

    def test_lists_pods_by_template_labels(
        self, print_options: PrintOptions, object_store: MagicMock
    ) -> None:
        """Pods matching the template labels render as rows."""
        object_store.list.return_value = [to_unstructured(create_pod("pod"))]

        got = deployment_pods(create_deployment(), print_options)

        expected = Table(title="Pods", columns=POD_COLUMNS)
        expected.add(
            {
                "Name": Link(text="pod", ref="/path"),
                "Ready": Text(value="0/0"),
                "Phase": Text(value=""),
                "Restarts": Text(value="0"),
                "Node": Text(value=""),
                "Age": Timestamp(value=CREATED),
            }
        )
        assert got == expected
        object_store.list.assert_called_once_with(
            Key(namespace="namespace", api_version="v1", kind="Pod", selector={"app": "my_app"})
        )

    def test_no_template_labels(self, print_options: PrintOptions, object_store: MagicMock) -> None:
        """Without template labels the table is empty and the store is not queried."""
        deployment = create_deployment()
        deployment.spec.template.metadata.labels = None

        got = deployment_pods(deployment, print_options)

        assert got == Table(title="Pods", columns=POD_COLUMNS)
        object_store.list.assert_not_called()

    def test_store_error_is_wrapped(
        self, print_options: PrintOptions, object_store: MagicMock
    ) -> None:
        """Store failures surface as UpstreamError with the original error kept."""
        failure = RuntimeError("connection refused")
        object_store.list.side_effect = failure

        with pytest.raises(UpstreamError) as exc_info:
            deployment_pods(create_deployment(), print_options)

        assert exc_info.value.original_error is failure
        assert exc_info.value.__cause__ is failure

    def test_printer_error_passes_through(
        self, print_options: PrintOptions, object_store: MagicMock
    ) -> None:
        """Printer errors raised by the store are not re-wrapped."""
        failure = InvalidArgumentError("bad key")
        object_store.list.side_effect = failure

        with pytest.raises(InvalidArgumentError) as exc_info:
            deployment_pods(create_deployment(), print_options)

        assert exc_info.value is failure

    def test_cancelled_before_query(
        self, print_options: PrintOptions, object_store: MagicMock
    ) -> None:
        """A cancelled render does not query the store."""
        print_options.context.cancel()

        with pytest.raises(RenderCancelledError):
            deployment_pods(create_deployment(), print_options)

        object_store.list.assert_not_called()

    def test_cancelled_during_query(
        self, print_options: PrintOptions, object_store: MagicMock
    ) -> None:
        """Cancellation during the store call discards the result."""

        def cancel_and_return(key: Key) -> list[dict[str, object]]:
            print_options.context.cancel()
            return [to_unstructured(create_pod("pod"))]

        object_store.list.side_effect = cancel_and_return

        with pytest.raises(RenderCancelledError):
            deployment_pods(create_deployment(), print_options)

    def test_bare_pod_renders_zero_values(
        self, print_options: PrintOptions, object_store: MagicMock
    ) -> None:
        """A pod with empty spec and status renders zero values, not an error."""
        object_store.list.return_value = [
            {
                "apiVersion": "v1",
                "kind": "Pod",
                "metadata": {"name": "pod", "namespace": "namespace"},
                "spec": {},
                "status": {},
            }
        ]

        got = deployment_pods(create_deployment(), print_options)

        row = got.rows[0]
        assert row["Ready"] == Text(value="0/0")
        assert row["Restarts"] == Text(value="0")
        assert row["Phase"] == Text(value="")
        assert row["Node"] == Text(value="")

    def test_partial_container_status(
        self, print_options: PrintOptions, object_store: MagicMock
    ) -> None:
        """Container statuses missing required fields still count."""
        object_store.list.return_value = [
            {
                "kind": "Pod",
                "metadata": {"name": "pod"},
                "spec": {"containers": [{"name": "app"}]},
                "status": {
                    "phase": "Running",
                    "containerStatuses": [{"name": "app", "ready": True, "restartCount": 2}],
                },
            }
        ]

        row = deployment_pods(create_deployment(), print_options).rows[0]

        assert row["Ready"] == Text(value="1/1")
        assert row["Restarts"] == Text(value="2")
        assert row["Phase"] == Text(value="Running")

    def test_wrongly_shaped_pod(
        self, print_options: PrintOptions, object_store: MagicMock
    ) -> None:
        """A store object whose fields have the wrong shape is an upstream error."""
        object_store.list.return_value = [
            {"apiVersion": "v1", "kind": "Pod", "metadata": {"name": "pod"}, "spec": []}
        ]

        with pytest.raises(UpstreamError, match="converting pod"):
            deployment_pods(create_deployment(), print_options)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestEditDeploymentAction:
    """Test edit_deployment_action."""

    def test_action(self) -> None:
        """One Edit action with the replica field and hidden identity fields."""
        deployment = create_deployment()
        deployment.spec.replicas = 3

        got = edit_deployment_action(deployment)

        assert got == [
            Action(
                name="Edit",
                title="Deployment Editor",
                form=Form(
                    fields=[
                        FormField.number("Replicas", "replicas", "3"),
                        FormField.hidden("group", "apps"),
                        FormField.hidden("version", "v1"),
                        FormField.hidden("kind", "Deployment"),
                        FormField.hidden("name", "deployment"),
                        FormField.hidden("namespace", "namespace"),
                        FormField.hidden("action", "deployment/configuration"),
                    ]
                ),
            )
        ]

    def test_missing_type_metadata(self) -> None:
        """Group, version and kind fall back to the printer's registration."""
        deployment = create_deployment()
        deployment.api_version = None
        deployment.kind = None

        values = edit_deployment_action(deployment)[0].form.values()

        assert values["group"] == "apps"
        assert values["version"] == "v1"
        assert values["kind"] == "Deployment"
        assert values["replicas"] == ""

    def test_nil_deployment(self) -> None:
        """A nil deployment yields no partial action."""
        with pytest.raises(InvalidArgumentError):
            edit_deployment_action(None)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestDeploymentHandler:
    """Test deployment_handler."""

    def test_layout(self, print_options: PrintOptions) -> None:
        """Configuration and status side by side, then pods, plus the edit action."""
        deployment = create_deployment()

        got = deployment_handler(deployment, print_options)

        assert isinstance(got, FlexLayout)
        assert got.title == "deployment"
        assert [[item.width for item in section] for section in got.sections] == [[12, 12], [24]]
        assert got.sections[0][0].view == DeploymentConfiguration(deployment).create()
        assert got.sections[0][1].view == DeploymentStatus(deployment).create()
        assert got.sections[1][0].view == Table(title="Pods", columns=POD_COLUMNS)
        assert got.button_group == edit_deployment_action(deployment)

    def test_conditions_section(self, print_options: PrintOptions) -> None:
        """Reported conditions render as a full-width table."""
        deployment = create_deployment()
        deployment.status = V1DeploymentStatus(
            conditions=[
                V1DeploymentCondition(
                    type="Available",
                    status="True",
                    reason="MinimumReplicasAvailable",
                    message="Deployment has minimum availability.",
                    last_update_time=CREATED,
                )
            ]
        )

        got = deployment_handler(deployment, print_options)

        assert len(got.sections) == 3
        conditions = got.sections[2][0].view
        assert isinstance(conditions, Table)
        assert conditions.title == "Conditions"
        assert conditions.rows == [
            {
                "Type": Text(value="Available"),
                "Reason": Text(value="MinimumReplicasAvailable"),
                "Status": Text(value="True"),
                "Message": Text(value="Deployment has minimum availability."),
                "Last Update": Timestamp(value=CREATED),
                "Last Transition": Text(value=""),
            }
        ]

    def test_nil_deployment(self, print_options: PrintOptions) -> None:
        """A None deployment is rejected."""
        with pytest.raises(InvalidArgumentError):
            deployment_handler(None, print_options)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestDeploymentPrinter:
    """Test DeploymentPrinter dispatch."""

    def test_registration(self) -> None:
        """The printer declares its kind and models."""
        printer = DeploymentPrinter()
        assert printer.kind == "Deployment"
        assert printer.api_version == "apps/v1"
        assert printer.list_model == "V1DeploymentList"

    def test_from_unstructured(self) -> None:
        """Raw objects are typed as V1Deployment."""
        deployment = create_deployment()
        typed = DeploymentPrinter().from_unstructured(to_unstructured(deployment))
        assert typed.metadata.name == "deployment"
        assert typed.spec.selector.match_labels == {"app": "my_app"}

    def test_handlers_delegate(self, print_options: PrintOptions) -> None:
        """Printer methods return the module-level handler output."""
        deployment = create_deployment()
        printer = DeploymentPrinter()

        assert printer.configuration(deployment) == DeploymentConfiguration(deployment).create()
        assert printer.status(deployment, print_options) == DeploymentStatus(deployment).create()
        assert printer.actions(deployment) == edit_deployment_action(deployment)

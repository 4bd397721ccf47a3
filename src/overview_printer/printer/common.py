"""Component builders shared by the per-kind printers."""

from __future__ import annotations

import re
from typing import Any

from overview_printer.component import (
    Containers,
    ExpressionSelector,
    Labels,
    LabelSelector,
    Link,
    Operator,
    Selector,
    Selectors,
    Table,
    Text,
    Timestamp,
)
from overview_printer.exceptions import ConfigurationError, InvalidArgumentError
from overview_printer.models import ConditionSummary, ContainerImage, K8sEntityBase
from overview_printer.printer.options import PrintOptions

_PERCENT = re.compile(r"^\d+%$")

CONDITION_COLUMNS = ["Type", "Reason", "Status", "Message", "Last Update", "Last Transition"]


def name_link(obj: Any, entity: K8sEntityBase, options: PrintOptions) -> Link:
    """Link to ``obj`` labelled with its name."""
    return Link(text=entity.name, ref=options.link.path_for(obj, entity.name))


def labels_component(entity: K8sEntityBase) -> Labels:
    return Labels(labels=dict(entity.labels))


def timestamp_component(entity: K8sEntityBase) -> Timestamp:
    return Timestamp(value=entity.created)


def containers_component(containers: list[ContainerImage]) -> Containers:
    """Containers in pod template order."""
    component = Containers()
    for container in containers:
        component.add(container.name, container.image)
    return component


def print_selector(label_selector: Any) -> Selectors:
    """Render a V1LabelSelector.

    Match expressions come first in spec order, then match labels in key order.

    Raises:
        InvalidArgumentError: If an expression uses an unknown operator.
    """
    selectors: list[Selector] = []
    if label_selector is None:
        return Selectors()

    for expression in getattr(label_selector, "match_expressions", None) or []:
        try:
            operator = Operator(expression.operator)
        except ValueError as e:
            raise InvalidArgumentError(
                f"unknown selector operator {expression.operator!r} for key {expression.key!r}"
            ) from e
        selectors.append(
            ExpressionSelector(
                key=expression.key, operator=operator, values=list(expression.values or [])
            )
        )

    match_labels = getattr(label_selector, "match_labels", None) or {}
    for key in sorted(match_labels):
        selectors.append(LabelSelector(key=key, value=match_labels[key]))

    return Selectors(selectors=selectors)


def format_int_or_string(value: Any) -> str:
    """Render an int-or-string value (e.g. ``maxSurge``).

    Percentages are kept verbatim, integers become decimal strings and an
    unset value renders as ``"0"``.

    Raises:
        ConfigurationError: For strings that are not percentages and for other types.
    """
    if value is None:
        return "0"
    if isinstance(value, bool):
        raise ConfigurationError(f"invalid int-or-string value {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and _PERCENT.match(value):
        return value
    raise ConfigurationError(f"invalid int-or-string value {value!r}")


def conditions_table(conditions: list[Any]) -> Table:
    """Status conditions table, in the order reported by the controller."""
    table = Table(title="Conditions", columns=CONDITION_COLUMNS)
    for item in conditions:
        condition = ConditionSummary.from_k8s_object(item)
        table.add(
            {
                "Type": Text(value=condition.type),
                "Reason": Text(value=condition.reason),
                "Status": Text(value=condition.status),
                "Message": Text(value=condition.message),
                "Last Update": _optional_timestamp(condition.last_update_time),
                "Last Transition": _optional_timestamp(condition.last_transition_time),
            }
        )
    return table


def _optional_timestamp(value: Any) -> Timestamp | Text:
    return Timestamp(value=value) if value is not None else Text(value="")

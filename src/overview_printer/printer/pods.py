"""Related pod lookups through the object store."""

from __future__ import annotations

from typing import Any

import structlog

from overview_printer.component import Table, Text, Timestamp
from overview_printer.exceptions import PrinterError, UpstreamError
from overview_printer.models import PodSummary
from overview_printer.printer.common import name_link
from overview_printer.printer.conversion import to_typed
from overview_printer.printer.options import PrintOptions
from overview_printer.store.interfaces import Key

logger = structlog.get_logger()

POD_COLUMNS = ["Name", "Ready", "Phase", "Restarts", "Node", "Age"]


def list_pods(
    namespace: str | None, selector: dict[str, str], options: PrintOptions
) -> list[Any]:
    """Query the store for pods matching ``selector`` and return V1Pod objects.

    Fields the stored pod leaves out stay unset and render as zero values.

    Raises:
        RenderCancelledError: If the render context is cancelled.
        UpstreamError: If the store fails or returns an object that is not a pod.
    """
    key = Key(namespace=namespace, api_version="v1", kind="Pod", selector=dict(selector))
    log = logger.bind(key=str(key), request_id=options.context.request_id)

    options.context.raise_if_cancelled()
    try:
        objects = options.object_store.list(key)
    except PrinterError:
        raise
    except Exception as e:
        log.warning("pod_list_failed", error=str(e))
        raise UpstreamError(
            message=f"listing pods: {e}",
            original_error=e,
            resource_type="Pod",
            namespace=namespace,
        ) from e
    options.context.raise_if_cancelled()

    pods = []
    for obj in objects:
        try:
            pods.append(to_typed(obj, "V1Pod"))
        except (ValueError, TypeError) as e:
            raise UpstreamError(
                message=f"converting pod: {e}",
                original_error=e,
                resource_type="Pod",
                namespace=namespace,
            ) from e
    log.debug("listed_related_pods", count=len(pods))
    return pods


def related_pods(
    namespace: str | None, selector: dict[str, str] | None, options: PrintOptions
) -> Table:
    """Table of the pods selected by ``selector``.

    An empty selector selects nothing: the table is returned empty and the
    store is not queried.
    """
    if not selector:
        return pods_table([], options)
    return pods_table(list_pods(namespace, selector, options), options)


def pods_table(pods: list[Any], options: PrintOptions) -> Table:
    """Table rows for already listed pods."""
    table = Table(title="Pods", columns=POD_COLUMNS)
    for pod in pods:
        summary = PodSummary.from_k8s_object(pod)
        table.add(
            {
                "Name": name_link(pod, summary, options),
                "Ready": Text(value=summary.ready),
                "Phase": Text(value=summary.phase),
                "Restarts": Text(value=str(summary.restarts)),
                "Node": Text(value=summary.node_name),
                "Age": Timestamp(value=summary.created),
            }
        )
    return table


def count_pod_phases(pods: list[Any]) -> dict[str, int]:
    """Count pods per phase (Running, Pending, Succeeded, Failed)."""
    counts = {"Running": 0, "Pending": 0, "Succeeded": 0, "Failed": 0}
    for pod in pods:
        phase = PodSummary.from_k8s_object(pod).phase
        if phase in counts:
            counts[phase] += 1
    return counts

"""Edit-form action generation."""

from __future__ import annotations

from typing import Any

from overview_printer.component import Action, Form, FormField
from overview_printer.exceptions import InvalidArgumentError
from overview_printer.models.base import _safe_get
from overview_printer.printer.conversion import group_version


def edit_replicas_action(
    resource: Any, *, kind: str, api_version: str, action: str
) -> list[Action]:
    """Build the single "Edit" action for a replica-managing workload.

    The visible field is the replica count; the hidden fields identify the
    object and the update path (``action``) the submitted form is routed to.
    ``kind`` and ``api_version`` are used when the object carries no type
    metadata of its own.

    Raises:
        InvalidArgumentError: If the resource is None.
    """
    if resource is None:
        raise InvalidArgumentError(f"{kind} is nil", resource_type=kind)
    resource_kind = getattr(resource, "kind", None) or kind
    group, version = group_version(getattr(resource, "api_version", None) or api_version)
    replicas = _safe_get(resource, "spec", "replicas")

    fields = [
        FormField.number("Replicas", "replicas", "" if replicas is None else str(replicas)),
        FormField.hidden("group", group),
        FormField.hidden("version", version),
        FormField.hidden("kind", resource_kind),
        FormField.hidden("name", _safe_get(resource, "metadata", "name", default="")),
        FormField.hidden("namespace", _safe_get(resource, "metadata", "namespace", default="")),
        FormField.hidden("action", action),
    ]
    return [Action(name="Edit", title=f"{resource_kind} Editor", form=Form(fields=fields))]

"""Path resolution for cross-resource navigation."""

from __future__ import annotations

from typing import Any

from overview_printer.store.interfaces import LinkResolver

# kind -> (section, path segment)
KIND_PATHS: dict[str, tuple[str, str]] = {
    "CronJob": ("workloads", "cron-jobs"),
    "DaemonSet": ("workloads", "daemon-sets"),
    "Deployment": ("workloads", "deployments"),
    "Job": ("workloads", "jobs"),
    "Pod": ("workloads", "pods"),
    "ReplicaSet": ("workloads", "replica-sets"),
    "StatefulSet": ("workloads", "stateful-sets"),
    "Ingress": ("discovery-and-load-balancing", "ingresses"),
    "Service": ("discovery-and-load-balancing", "services"),
    "ConfigMap": ("config-and-storage", "config-maps"),
    "PersistentVolumeClaim": ("config-and-storage", "persistent-volume-claims"),
    "Secret": ("config-and-storage", "secrets"),
    "ServiceAccount": ("config-and-storage", "service-accounts"),
}


def _object_identity(obj: Any) -> tuple[str, str | None, str | None]:
    """Return (kind, namespace, name) for an SDK model or unstructured dict."""
    if isinstance(obj, dict):
        metadata = obj.get("metadata") or {}
        return obj.get("kind") or "", metadata.get("namespace"), metadata.get("name")

    kind = getattr(obj, "kind", None)
    if not kind:
        # SDK models built in code often omit type metadata; V1Deployment -> Deployment
        class_name = type(obj).__name__
        kind = class_name[2:] if class_name.startswith("V1") else class_name
    metadata = getattr(obj, "metadata", None)
    return (
        kind,
        getattr(metadata, "namespace", None),
        getattr(metadata, "name", None),
    )


class OverviewPathResolver(LinkResolver):
    """Builds ``<prefix>/namespace/<ns>/<section>/<segment>/<name>`` paths.

    Kinds without a known section are placed under
    ``custom-resources/<lowercased kind>``.

    Example:
        >>> OverviewPathResolver("/overview").path_for(deployment, "nginx")
        '/overview/namespace/default/workloads/deployments/nginx'
    """

    def __init__(self, prefix: str = "/overview") -> None:
        self._prefix = prefix.rstrip("/")

    def path_for(self, obj: Any, title: str) -> str:
        """Return the overview path for ``obj``; ``title`` stands in for a missing name."""
        kind, namespace, name = _object_identity(obj)
        section, segment = KIND_PATHS.get(kind, ("custom-resources", kind.lower()))
        parts = [self._prefix, "namespace", namespace or "default", section, segment, name or title]
        return "/".join(parts)

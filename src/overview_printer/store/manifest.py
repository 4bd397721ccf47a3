"""In-memory object store loaded from YAML manifests."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import yaml

from overview_printer.exceptions import InvalidArgumentError
from overview_printer.store.interfaces import Key, ObjectStore

logger = structlog.get_logger()


class ManifestObjectStore(ObjectStore):
    """Object store over a fixed set of unstructured objects.

    ``kind: List`` documents are flattened into their items. Objects without a
    namespace are treated as living in ``default_namespace``.

    Example:
        >>> store = ManifestObjectStore.from_paths([Path("deploy.yaml")])
        >>> store.list(Key(namespace="default", api_version="v1", kind="Pod"))
    """

    def __init__(
        self,
        objects: Iterable[dict[str, Any]] = (),
        default_namespace: str = "default",
    ) -> None:
        self._default_namespace = default_namespace
        self._objects: list[dict[str, Any]] = []
        for obj in objects:
            self.add(obj)

    @classmethod
    def from_paths(
        cls, paths: Iterable[Path], default_namespace: str = "default"
    ) -> ManifestObjectStore:
        """Load every YAML document from ``paths``.

        Raises:
            InvalidArgumentError: If a file is not valid YAML, or a document is not
                a mapping with kind and apiVersion.
        """
        store = cls(default_namespace=default_namespace)
        for path in paths:
            try:
                with path.open() as fh:
                    documents = list(yaml.safe_load_all(fh))
            except yaml.YAMLError as e:
                raise InvalidArgumentError(f"invalid YAML in {path}: {e}") from e
            for document in documents:
                if document is not None:
                    store.add(document)
            logger.debug("loaded_manifest", path=str(path), objects=len(store))
        return store

    def add(self, obj: dict[str, Any]) -> None:
        """Add an object, flattening ``List`` kinds."""
        if not isinstance(obj, dict) or not obj.get("kind") or not obj.get("apiVersion"):
            raise InvalidArgumentError("manifest documents must be objects with kind and apiVersion")
        if obj["kind"].endswith("List") and "items" in obj:
            item_kind = obj["kind"].removesuffix("List")
            for item in obj.get("items") or []:
                item = dict(item)
                if item_kind:
                    item.setdefault("kind", item_kind)
                item.setdefault("apiVersion", obj["apiVersion"])
                self.add(item)
            return

        obj = copy.deepcopy(obj)
        metadata = obj.setdefault("metadata", {})
        metadata.setdefault("namespace", self._default_namespace)
        self._objects.append(obj)

    def list(self, key: Key) -> list[dict[str, Any]]:
        """Return deep copies of matching objects, in load order."""
        return [copy.deepcopy(obj) for obj in self._objects if key.matches(obj)]

    def get(self, key: Key) -> dict[str, Any] | None:
        """Return the first object matching ``key`` (which must carry a name)."""
        if not key.name:
            raise InvalidArgumentError(f"get requires a name: {key}")
        for obj in self._objects:
            if key.matches(obj):
                return copy.deepcopy(obj)
        return None

    def __len__(self) -> int:
        return len(self._objects)

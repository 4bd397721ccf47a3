"""Object store and link resolver contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict


class Key(BaseModel):
    """Identifies the objects a store query should return.

    ``name`` selects a single object; ``selector`` is a label set that every
    returned object's labels must contain.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    namespace: str | None = None
    api_version: str
    kind: str
    name: str | None = None
    selector: dict[str, str] | None = None

    def label_selector(self) -> str:
        """Render the selector as ``k=v,...`` in key order."""
        if not self.selector:
            return ""
        return ",".join(f"{k}={v}" for k, v in sorted(self.selector.items()))

    def matches(self, obj: dict[str, Any]) -> bool:
        """Return True if an unstructured object satisfies this key."""
        metadata = obj.get("metadata") or {}
        if obj.get("apiVersion") != self.api_version or obj.get("kind") != self.kind:
            return False
        if self.namespace and metadata.get("namespace", "default") != self.namespace:
            return False
        if self.name and metadata.get("name") != self.name:
            return False
        labels = metadata.get("labels") or {}
        return all(labels.get(k) == v for k, v in (self.selector or {}).items())

    def __str__(self) -> str:
        parts = [f"{self.api_version}/{self.kind}"]
        if self.namespace:
            parts.append(f"namespace={self.namespace}")
        if self.name:
            parts.append(f"name={self.name}")
        if self.selector:
            parts.append(f"selector={self.label_selector()}")
        return " ".join(parts)


class ObjectStore(ABC):
    """Query interface over raw (unstructured) cluster objects."""

    @abstractmethod
    def list(self, key: Key) -> list[dict[str, Any]]:
        """Return every object matching ``key``."""

    @abstractmethod
    def get(self, key: Key) -> dict[str, Any] | None:
        """Return the object named by ``key``, or None if absent."""


class LinkResolver(ABC):
    """Resolves navigation paths for objects."""

    @abstractmethod
    def path_for(self, obj: Any, title: str) -> str:
        """Return the presentation path for ``obj``."""

"""Base component types for the view tree."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class Component(BaseModel):
    """Base class for all view-tree nodes.

    Components compare structurally (pydantic model equality) and serialize
    to the presentation layer's node format through ``to_wire``::

        {"metadata": {"type": "text"}, "config": {"value": "2/3"}}

    Subclasses set ``_component_type`` and implement ``_wire_config``.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    _component_type: ClassVar[str] = "component"

    @property
    def component_type(self) -> str:
        """Wire type tag for this node."""
        return self._component_type

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the recursive node format."""
        metadata: dict[str, Any] = {"type": self._component_type}
        title = getattr(self, "title", None)
        if title:
            metadata["title"] = title
        return {"metadata": metadata, "config": self._wire_config()}

    def _wire_config(self) -> dict[str, Any]:
        raise NotImplementedError


class Text(Component):
    """Plain text node."""

    _component_type: ClassVar[str] = "text"

    value: str = Field(default="", description="Text to display")

    def _wire_config(self) -> dict[str, Any]:
        return {"value": self.value}


class Link(Component):
    """Navigation link to another resource."""

    _component_type: ClassVar[str] = "link"

    title: str = Field(default="", description="Link title")
    text: str = Field(description="Displayed text")
    ref: str = Field(description="Target path")

    def _wire_config(self) -> dict[str, Any]:
        return {"text": self.text, "ref": self.ref}


class Timestamp(Component):
    """Point in time, rendered relative or absolute by the frontend."""

    _component_type: ClassVar[str] = "timestamp"

    value: datetime = Field(description="Timestamp value")

    def _wire_config(self) -> dict[str, Any]:
        return {"timestamp": int(self.value.timestamp())}


class Labels(Component):
    """Key/value label set."""

    _component_type: ClassVar[str] = "labels"

    labels: dict[str, str] = Field(default_factory=dict, description="Labels")

    def _wire_config(self) -> dict[str, Any]:
        return {"labels": dict(self.labels)}

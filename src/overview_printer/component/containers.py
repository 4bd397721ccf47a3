"""Container list component."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from overview_printer.component.base import Component


class ContainerDef(BaseModel):
    """A single container name/image pair."""

    model_config = ConfigDict(extra="forbid")

    name: str
    image: str


class Containers(Component):
    """Ordered name/image pairs, in pod template order."""

    _component_type: ClassVar[str] = "containers"

    containers: list[ContainerDef] = Field(default_factory=list, description="Containers")

    def add(self, name: str, image: str) -> None:
        """Append a container definition."""
        self.containers.append(ContainerDef(name=name, image=image))

    def _wire_config(self) -> dict[str, Any]:
        return {"containers": [c.model_dump() for c in self.containers]}

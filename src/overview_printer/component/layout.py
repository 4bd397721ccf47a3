"""Flex layout used for resource detail views."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from overview_printer.component.base import Component
from overview_printer.component.form import Action

WIDTH_HALF = 12
WIDTH_FULL = 24


class FlexLayoutItem(BaseModel):
    """A view occupying ``width`` of a 24-column row."""

    model_config = ConfigDict(extra="forbid")

    width: int = Field(ge=1, le=WIDTH_FULL)
    view: Component


class FlexLayout(Component):
    """Rows of sized views plus a button group of actions."""

    _component_type: ClassVar[str] = "flexlayout"

    title: str = Field(default="", description="Layout title")
    sections: list[list[FlexLayoutItem]] = Field(default_factory=list)
    button_group: list[Action] = Field(default_factory=list)

    def add_section(self, *items: FlexLayoutItem) -> None:
        """Append a row of items."""
        self.sections.append(list(items))

    def views(self) -> list[Component]:
        """All views in section order."""
        return [item.view for section in self.sections for item in section]

    def _wire_config(self) -> dict[str, Any]:
        return {
            "sections": [
                [{"width": item.width, "view": item.view.to_wire()} for item in section]
                for section in self.sections
            ],
            "buttonGroup": [action.to_wire() for action in self.button_group],
        }

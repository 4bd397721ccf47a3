"""Quadrant component: four labeled status cells."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from overview_printer.component.base import Component
from overview_printer.exceptions import InvalidArgumentError


class QuadrantPosition(StrEnum):
    """Cell positions, in wire order."""

    NW = "nw"
    NE = "ne"
    SW = "sw"
    SE = "se"


class QuadrantValue(BaseModel):
    """Label/value pair for a quadrant cell."""

    model_config = ConfigDict(extra="forbid")

    label: str
    value: str


class Quadrant(Component):
    """Four-cell status snapshot. Each position may be set once."""

    _component_type: ClassVar[str] = "quadrant"

    title: str = Field(description="Quadrant title")
    cells: dict[QuadrantPosition, QuadrantValue] = Field(
        default_factory=dict, description="Cells by position"
    )

    def set(self, position: QuadrantPosition, label: str, value: str) -> None:
        """Set a cell.

        Raises:
            InvalidArgumentError: If the position was already set.
        """
        position = QuadrantPosition(position)
        if position in self.cells:
            raise InvalidArgumentError(
                f"quadrant {self.title!r} position {position.value} is already set"
            )
        self.cells[position] = QuadrantValue(label=label, value=value)

    def get(self, position: QuadrantPosition) -> QuadrantValue | None:
        """Return the cell at ``position`` if set."""
        return self.cells.get(QuadrantPosition(position))

    def _wire_config(self) -> dict[str, Any]:
        return {
            p.value: self.cells[p].model_dump() for p in QuadrantPosition if p in self.cells
        }

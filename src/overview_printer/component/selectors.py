"""Label and expression selector components."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar

from pydantic import Field

from overview_printer.component.base import Component


class Operator(StrEnum):
    """Set-based selector operators."""

    IN = "In"
    NOT_IN = "NotIn"
    EXISTS = "Exists"
    DOES_NOT_EXIST = "DoesNotExist"


class LabelSelector(Component):
    """Equality selector ``key=value``."""

    _component_type: ClassVar[str] = "labelSelector"

    key: str = Field(description="Label key")
    value: str = Field(description="Label value")

    def _wire_config(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value}


class ExpressionSelector(Component):
    """Set-based selector ``key <operator> (values)``."""

    _component_type: ClassVar[str] = "expressionSelector"

    key: str = Field(description="Label key")
    operator: Operator = Field(description="Selector operator")
    values: list[str] = Field(default_factory=list, description="Operand values")

    def _wire_config(self) -> dict[str, Any]:
        return {"key": self.key, "operator": str(self.operator), "values": list(self.values)}


Selector = LabelSelector | ExpressionSelector


class Selectors(Component):
    """Ordered list of selectors."""

    _component_type: ClassVar[str] = "selectors"

    selectors: list[Selector] = Field(default_factory=list, description="Selectors")

    def _wire_config(self) -> dict[str, Any]:
        return {"selectors": [s.to_wire() for s in self.selectors]}

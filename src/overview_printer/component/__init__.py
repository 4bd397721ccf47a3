"""View-tree components consumed by the presentation layer."""

from overview_printer.component.base import Component, Labels, Link, Text, Timestamp
from overview_printer.component.containers import ContainerDef, Containers
from overview_printer.component.form import Action, FieldType, Form, FormField
from overview_printer.component.layout import (
    WIDTH_FULL,
    WIDTH_HALF,
    FlexLayout,
    FlexLayoutItem,
)
from overview_printer.component.quadrant import Quadrant, QuadrantPosition, QuadrantValue
from overview_printer.component.selectors import (
    ExpressionSelector,
    LabelSelector,
    Operator,
    Selector,
    Selectors,
)
from overview_printer.component.summary import Summary, SummarySection
from overview_printer.component.table import Table, TableRow

__all__ = [
    "WIDTH_FULL",
    "WIDTH_HALF",
    "Action",
    "Component",
    "ContainerDef",
    "Containers",
    "ExpressionSelector",
    "FieldType",
    "FlexLayout",
    "FlexLayoutItem",
    "Form",
    "FormField",
    "LabelSelector",
    "Labels",
    "Link",
    "Operator",
    "Quadrant",
    "QuadrantPosition",
    "QuadrantValue",
    "Selector",
    "Selectors",
    "Summary",
    "SummarySection",
    "Table",
    "TableRow",
    "Text",
    "Timestamp",
]

"""Output formatters for rendered component trees.

Implements the Strategy pattern for output formatting, so ``render`` can
emit the wire form as JSON or YAML, or a rich preview in the terminal.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from enum import StrEnum

import yaml
from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from overview_printer.cli.output.table import Table
from overview_printer.component import (
    Component,
    Containers,
    ExpressionSelector,
    FlexLayout,
    Labels,
    LabelSelector,
    Link,
    Operator,
    Quadrant,
    QuadrantPosition,
    Selectors,
    Summary,
    Text,
    Timestamp,
)
from overview_printer.component import Table as TableComponent


class OutputFormat(StrEnum):
    """Supported output formats for the render command."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class ComponentFormatter(ABC):
    """Abstract base class for component formatters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def format_component(self, component: Component) -> None:
        """Format and display a component tree."""

    def format_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(f"[red]Error:[/red] {escape(message)}")


class JsonFormatter(ComponentFormatter):
    """Wire form as indented JSON."""

    def format_component(self, component: Component) -> None:
        self.console.out(json.dumps(component.to_wire(), indent=2, default=str), highlight=False)


class YamlFormatter(ComponentFormatter):
    """Wire form as YAML."""

    def format_component(self, component: Component) -> None:
        self.console.out(
            yaml.safe_dump(component.to_wire(), default_flow_style=False, sort_keys=False),
            highlight=False,
        )


class TableFormatter(ComponentFormatter):
    """Terminal preview of a component tree using rich tables."""

    def format_component(self, component: Component) -> None:
        if isinstance(component, FlexLayout):
            self._format_layout(component)
        elif isinstance(component, TableComponent):
            self._format_table(component)
        elif isinstance(component, Summary):
            self._format_summary(component)
        elif isinstance(component, Quadrant):
            self._format_quadrant(component)
        else:
            self.console.print(display_text(component), markup=False)

    def _format_layout(self, layout: FlexLayout) -> None:
        self.console.print(Rule(layout.title))
        for view in layout.views():
            self.format_component(view)
        if layout.button_group:
            names = ", ".join(action.name for action in layout.button_group)
            self.console.print(f"[dim]Actions: {names}[/dim]")

    def _format_table(self, component: TableComponent) -> None:
        table = Table(title=component.title, show_header=True)
        for column in component.columns:
            style = "cyan" if column == "Name" else None
            table.add_column(column, style=style)
        for row in component.rows:
            table.add_text_row(*(display_text(row[column]) for column in component.columns))
        self.console.print(table)
        if component.is_empty():
            self.console.print(f"[dim]{component.empty_content}[/dim]")

    def _format_summary(self, summary: Summary) -> None:
        table = Table.key_value(summary.title)
        for section in summary.sections:
            table.add_text_row(section.header, display_text(section.content))
        self.console.print(table)

    def _format_quadrant(self, quadrant: Quadrant) -> None:
        table = Table.key_value(quadrant.title)
        for position in QuadrantPosition:
            value = quadrant.get(position)
            if value is not None:
                table.add_text_row(value.label, value.value)
        self.console.print(table)


def display_text(component: Component) -> str:
    """Single-line text for a leaf component."""
    if isinstance(component, Text):
        return component.value
    if isinstance(component, Link):
        return component.text
    if isinstance(component, Timestamp):
        return component.value.isoformat()
    if isinstance(component, Labels):
        return ", ".join(f"{k}={v}" for k, v in sorted(component.labels.items())) or "-"
    if isinstance(component, Selectors):
        return ", ".join(_selector_text(s) for s in component.selectors) or "-"
    if isinstance(component, Containers):
        return ", ".join(f"{c.name} ({c.image})" for c in component.containers) or "-"
    if isinstance(component, LabelSelector | ExpressionSelector):
        return _selector_text(component)
    return component.component_type


def _selector_text(selector: LabelSelector | ExpressionSelector) -> str:
    if isinstance(selector, LabelSelector):
        return f"{selector.key}={selector.value}"
    if selector.operator in (Operator.EXISTS, Operator.DOES_NOT_EXIST):
        return f"{selector.key} {selector.operator}"
    return f"{selector.key} {selector.operator} ({', '.join(selector.values)})"


def get_formatter(format_type: OutputFormat, console: Console | None = None) -> ComponentFormatter:
    """Factory function to get the appropriate formatter."""
    if console is None:
        console = Console()

    formatters: dict[OutputFormat, type[ComponentFormatter]] = {
        OutputFormat.TABLE: TableFormatter,
        OutputFormat.JSON: JsonFormatter,
        OutputFormat.YAML: YamlFormatter,
    }

    formatter_class = formatters.get(format_type, JsonFormatter)
    return formatter_class(console)

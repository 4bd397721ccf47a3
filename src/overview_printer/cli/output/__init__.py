"""CLI output: rich tables and component formatters.

Usage:
    from overview_printer.cli.output import OutputFormat, get_formatter

    formatter = get_formatter(OutputFormat.TABLE, console)
    formatter.format_component(component)
"""

from overview_printer.cli.output.formatters import (
    ComponentFormatter,
    JsonFormatter,
    OutputFormat,
    TableFormatter,
    YamlFormatter,
    display_text,
    get_formatter,
)
from overview_printer.cli.output.table import Table

__all__ = [
    "ComponentFormatter",
    "JsonFormatter",
    "OutputFormat",
    "Table",
    "TableFormatter",
    "YamlFormatter",
    "display_text",
    "get_formatter",
]

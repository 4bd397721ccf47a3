"""Rich table used by the terminal preview."""

from __future__ import annotations

from typing import Any

from rich.markup import escape
from rich.table import Table as RichTable


class Table(RichTable):
    """Rich Table for rendered component text.

    Columns fold long values instead of truncating them, and cell text is
    added as plain text: resource data such as ``['Age']`` or ``[red]`` in a
    label value is never parsed as rich markup.
    """

    def add_column(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("overflow", "fold")
        super().add_column(*args, **kwargs)

    def add_text_row(self, *values: str) -> None:
        """Add a row of plain-text cells."""
        self.add_row(*(escape(value) for value in values))

    @classmethod
    def key_value(cls, title: str | None) -> Table:
        """Two-column, headerless table for summaries and quadrants."""
        table = cls(title=title, show_header=False)
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")
        return table

"""Table component."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from overview_printer.component.base import Component
from overview_printer.exceptions import InvalidArgumentError

TableRow = dict[str, Component]


class Table(Component):
    """Titled table with an ordered column set.

    Every row must carry exactly the declared columns; ``add`` rejects rows
    with missing or extra keys.

    Example:
        >>> table = Table(title="Pods", columns=["Name", "Age"])
        >>> table.add({"Name": Text(value="pod"), "Age": Text(value="1d")})
    """

    _component_type: ClassVar[str] = "table"

    title: str = Field(description="Table title")
    columns: list[str] = Field(default_factory=list, description="Ordered column names")
    rows: list[TableRow] = Field(default_factory=list, description="Ordered rows")
    empty_content: str = Field(
        default="There are no items!", description="Text shown for an empty table"
    )

    @classmethod
    def with_rows(cls, title: str, columns: list[str], rows: list[TableRow]) -> Table:
        """Create a table and add ``rows`` in order."""
        table = cls(title=title, columns=list(columns))
        table.add(*rows)
        return table

    def add(self, *rows: TableRow) -> None:
        """Append rows, checking each against the column set.

        Raises:
            InvalidArgumentError: If a row's keys differ from the columns.
        """
        expected = set(self.columns)
        for row in rows:
            if set(row) != expected or len(row) != len(self.columns):
                missing = sorted(expected - set(row))
                extra = sorted(set(row) - expected)
                raise InvalidArgumentError(
                    f"table {self.title!r} row does not match columns "
                    f"(missing: {missing}, extra: {extra})"
                )
            self.rows.append(dict(row))

    def is_empty(self) -> bool:
        """Return True when the table has no rows."""
        return not self.rows

    def _wire_config(self) -> dict[str, Any]:
        return {
            "columns": [{"name": c, "accessor": c} for c in self.columns],
            "rows": [{c: row[c].to_wire() for c in self.columns} for row in self.rows],
            "emptyContent": self.empty_content,
        }

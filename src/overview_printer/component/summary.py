"""Summary component: ordered header/content sections."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from overview_printer.component.base import Component


class SummarySection(BaseModel):
    """A single header/content pair."""

    model_config = ConfigDict(extra="forbid")

    header: str
    content: Component


class Summary(Component):
    """Titled list of sections, kept in insertion order."""

    _component_type: ClassVar[str] = "summary"

    title: str = Field(description="Summary title")
    sections: list[SummarySection] = Field(default_factory=list, description="Sections")

    def add(self, header: str, content: Component) -> None:
        """Append a section."""
        self.sections.append(SummarySection(header=header, content=content))

    def headers(self) -> list[str]:
        """Return section headers in order."""
        return [s.header for s in self.sections]

    def _wire_config(self) -> dict[str, Any]:
        return {
            "sections": [
                {"header": s.header, "content": s.content.to_wire()} for s in self.sections
            ]
        }

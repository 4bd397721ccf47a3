"""Configuration summaries built from ordered action generators.

Each generator is a small stateless value object that contributes at most one
section. A summarizer runs its generators in order; sections appear in that
order and any generator failure aborts the whole summary.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

import structlog

from overview_printer.component import Component, Summary, SummarySection, Text
from overview_printer.exceptions import ConfigurationError, InvalidArgumentError, PrinterError
from overview_printer.models.base import _safe_get
from overview_printer.printer.common import print_selector

logger = structlog.get_logger()


class ActionGenerator(ABC):
    """Strategy contributing zero or one configuration section."""

    header: str

    @abstractmethod
    def content(self, resource: Any) -> Component | None:
        """Return the section content, or None when the section does not apply."""

    def generate(self, resource: Any) -> SummarySection | None:
        """Build the section for ``resource``."""
        content = self.content(resource)
        if content is None:
            return None
        return SummarySection(header=self.header, content=content)


@dataclass(frozen=True)
class SpecIntGenerator(ActionGenerator):
    """Renders an integer spec field as a decimal string.

    When the field is unset, renders ``default`` or omits the section when no
    default is given.
    """

    header: str
    field: str
    default: int | None = None

    def content(self, resource: Any) -> Component | None:
        value = _safe_get(resource, "spec", self.field)
        if value is None:
            value = self.default
        if value is None:
            return None
        return Text(value=str(value))


@dataclass(frozen=True)
class SelectorGenerator(ActionGenerator):
    """Renders ``spec.selector``; omitted when the selector is empty."""

    header: str = "Selectors"

    def content(self, resource: Any) -> Component | None:
        selectors = print_selector(_safe_get(resource, "spec", "selector"))
        return selectors if selectors.selectors else None


class ConfigurationSummarizer:
    """Runs an ordered generator sequence over one resource.

    Subclasses set ``resource_type`` and ``default_generators``. Callers may pass
    their own ``action_generators`` sequence (an empty one yields an empty
    summary).
    """

    title: ClassVar[str] = "Configuration"
    resource_type: ClassVar[str] = ""
    default_generators: ClassVar[tuple[ActionGenerator, ...]] = ()

    def __init__(
        self,
        resource: Any,
        action_generators: Sequence[ActionGenerator] | None = None,
    ) -> None:
        self._resource = resource
        self.action_generators: tuple[ActionGenerator, ...] = (
            tuple(action_generators)
            if action_generators is not None
            else self.default_generators
        )

    def create(self) -> Summary:
        """Build the summary.

        Raises:
            InvalidArgumentError: If the resource is None.
            ConfigurationError: If any generator fails. Other printer errors
                raised by a generator propagate unchanged.
        """
        if self._resource is None:
            raise InvalidArgumentError(f"{self.resource_type or 'resource'} is nil")

        summary = Summary(title=self.title)
        for generator in self.action_generators:
            try:
                section = generator.generate(self._resource)
            except PrinterError:
                raise
            except Exception as e:
                logger.warning(
                    "configuration_generator_failed",
                    resource_type=self.resource_type,
                    header=generator.header,
                    error=str(e),
                )
                raise ConfigurationError(
                    f"generating {generator.header!r}: {e}",
                    resource_type=self.resource_type,
                    resource_name=_safe_get(self._resource, "metadata", "name"),
                    namespace=_safe_get(self._resource, "metadata", "namespace"),
                ) from e
            if section is not None:
                summary.sections.append(section)
        return summary

"""Per-kind printer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from overview_printer.component import Action, Component, Summary, Table
from overview_printer.printer.conversion import to_typed
from overview_printer.printer.options import PrintOptions


class KindPrinter(ABC):
    """Renders one resource kind.

    Subclasses declare the kind they handle and the SDK model names used to
    type raw store objects, and implement the handlers.

    Example:
        >>> class DeploymentPrinter(KindPrinter):
        ...     kind = "Deployment"
        ...     api_version = "apps/v1"
        ...     model = "V1Deployment"
    """

    kind: ClassVar[str]
    api_version: ClassVar[str]
    model: ClassVar[str]

    @abstractmethod
    def list_handler(self, objects: Any, options: PrintOptions) -> Table:
        """Render a list object (e.g. V1DeploymentList) as a table."""

    @abstractmethod
    def object_handler(self, obj: Any, options: PrintOptions) -> Component:
        """Render a single object's detail view."""

    @abstractmethod
    def configuration(self, obj: Any) -> Summary:
        """Render the configuration summary."""

    @abstractmethod
    def status(self, obj: Any, options: PrintOptions) -> Component:
        """Render the status view."""

    @abstractmethod
    def actions(self, obj: Any) -> list[Action]:
        """Return the actions available on the object."""

    @property
    def list_model(self) -> str:
        """SDK list model name, e.g. ``V1DeploymentList``."""
        return f"{self.model}List"

    def from_unstructured(self, obj: dict[str, Any]) -> Any:
        """Type a raw store object."""
        return to_typed(obj, self.model)

    def list_from_unstructured(self, objects: Sequence[dict[str, Any]]) -> Any:
        """Type raw store objects as the kind's list model."""
        return to_typed(
            {
                "apiVersion": self.api_version,
                "kind": f"{self.kind}List",
                "metadata": {},
                "items": list(objects),
            },
            self.list_model,
        )

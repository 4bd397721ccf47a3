"""Kind to printer dispatch."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pluggy
import structlog

from overview_printer.component import Component, Table
from overview_printer.exceptions import InvalidArgumentError
from overview_printer.logging.config import render_context
from overview_printer.printer.base import KindPrinter
from overview_printer.printer.deployment import DeploymentPrinter
from overview_printer.printer.hooks import PROJECT_NAME, PrinterSpec, hookimpl
from overview_printer.printer.options import PrintOptions
from overview_printer.printer.replicaset import ReplicaSetPrinter

logger = structlog.get_logger()

ENTRY_POINT_GROUP = "overview_printer.printers"


class PrinterRegistry:
    """Maps resource kinds to their printers."""

    def __init__(self) -> None:
        self._printers: dict[str, KindPrinter] = {}

    def register(self, printer: KindPrinter) -> None:
        """Register a printer for its kind.

        Raises:
            ValueError: If a printer for the kind is already registered.
        """
        if printer.kind in self._printers:
            raise ValueError(f"Printer for kind '{printer.kind}' is already registered")
        self._printers[printer.kind] = printer
        logger.debug("Registered printer", kind=printer.kind, api_version=printer.api_version)

    def get(self, kind: str) -> KindPrinter:
        """Look up the printer for ``kind``.

        Raises:
            InvalidArgumentError: If no printer handles the kind.
        """
        try:
            return self._printers[kind]
        except KeyError:
            raise InvalidArgumentError(
                f"no printer registered for kind '{kind}'", resource_type=kind
            ) from None

    def kinds(self) -> list[str]:
        return sorted(self._printers)

    def __contains__(self, kind: object) -> bool:
        return kind in self._printers

    def print_list(
        self, kind: str, objects: Sequence[dict[str, Any]], options: PrintOptions
    ) -> Table:
        """Type raw objects as the kind's list model and render the list table.

        Raises:
            InvalidArgumentError: If the kind is unknown or an object is malformed.
        """
        printer = self.get(kind)
        with render_context(kind, request_id=options.context.request_id):
            try:
                typed = printer.list_from_unstructured(objects)
            except ValueError as e:
                raise InvalidArgumentError(
                    f"malformed {kind} object: {e}", resource_type=kind
                ) from e
            logger.debug("Printing list", count=len(objects))
            return printer.list_handler(typed, options)

    def print_object(self, kind: str, obj: dict[str, Any], options: PrintOptions) -> Component:
        """Type one raw object and render its detail view."""
        printer = self.get(kind)
        metadata = obj.get("metadata") if isinstance(obj, dict) else None
        name = metadata.get("name") if isinstance(metadata, dict) else None
        with render_context(kind, request_id=options.context.request_id, name=name):
            try:
                typed = printer.from_unstructured(obj)
            except ValueError as e:
                raise InvalidArgumentError(
                    f"malformed {kind} object: {e}", resource_type=kind, resource_name=name
                ) from e
            return printer.object_handler(typed, options)


class _BuiltinPrinters:
    @hookimpl(tryfirst=True)
    def register_printers(self, registry: PrinterRegistry) -> None:
        registry.register(DeploymentPrinter())
        registry.register(ReplicaSetPrinter())


def default_registry(load_plugins: bool = True) -> PrinterRegistry:
    """Build a registry with the built-in printers and any installed plugins.

    Args:
        load_plugins: Also load printers from the ``overview_printer.printers``
            entry-point group.

    Returns:
        The populated registry.
    """
    pm = pluggy.PluginManager(PROJECT_NAME)
    pm.add_hookspecs(PrinterSpec)
    pm.register(_BuiltinPrinters(), name="builtin")

    if load_plugins:
        try:
            loaded = pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
            if loaded:
                logger.info("Loaded printer plugins", count=loaded)
        except Exception as e:
            logger.warning("Error loading printer plugins", error=str(e))

    registry = PrinterRegistry()
    pm.hook.register_printers(registry=registry)
    return registry

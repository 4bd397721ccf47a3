"""Printer plugin hook specifications using pluggy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from overview_printer.printer.registry import PrinterRegistry

PROJECT_NAME = "overview_printer"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class PrinterSpec:
    """Hook specifications for third-party printers."""

    @hookspec
    def register_printers(self, registry: PrinterRegistry) -> None:
        """Register additional kind printers.

        Args:
            registry: The registry to call ``register`` on.
        """

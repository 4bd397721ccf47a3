"""Request-scoped print options."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field

from overview_printer.exceptions import RenderCancelledError
from overview_printer.store.interfaces import LinkResolver, ObjectStore


class RenderContext:
    """Per-render state: a request id for log context and a cancellation flag.

    ``cancel`` may be called from another thread; the printer checks the flag
    around every store call.
    """

    def __init__(self, request_id: str | None = None) -> None:
        self.request_id = request_id or uuid.uuid4().hex[:12]
        self._cancelled = threading.Event()

    def cancel(self) -> None:
        """Mark the render as cancelled."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        """True once ``cancel`` has been called."""
        return self._cancelled.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise ``RenderCancelledError`` if the render was cancelled."""
        if self._cancelled.is_set():
            raise RenderCancelledError(f"Render {self.request_id} cancelled")


@dataclass(frozen=True)
class PrintOptions:
    """Collaborators passed through every handler call."""

    object_store: ObjectStore
    link: LinkResolver
    context: RenderContext = field(default_factory=RenderContext)

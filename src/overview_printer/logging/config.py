"""Structured logging configuration using structlog.

Rendered component trees go to stdout, so every log line is written to
stderr. Per-render fields (``request_id``, ``kind``, ``name``, ``namespace``)
live in structlog's contextvars and are merged into each event logged while
the render runs.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

HANDLER_NAME = "overview-printer"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def configure_logging(
    verbose: bool = False,
    debug: bool = False,
    json_output: bool = False,
) -> None:
    """Route structlog through a single stderr handler on the root logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        verbose: Log at INFO instead of WARNING.
        debug: Log at DEBUG and show locals in tracebacks.
        json_output: One JSON object per line instead of the console renderer.
    """
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=debug),
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setLevel(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )

    root_logger = logging.getLogger()
    for existing in [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]:
        root_logger.removeHandler(existing)
    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)


@contextmanager
def render_context(
    kind: str,
    *,
    request_id: str | None = None,
    name: str | None = None,
    namespace: str | None = None,
) -> Iterator[None]:
    """Bind one render's identity into every log event emitted inside the block.

    Unset fields are not bound, so an outer binding (e.g. the CLI's namespace)
    survives an inner one that does not know it.
    """
    fields = {"kind": kind, "request_id": request_id, "name": name, "namespace": namespace}
    with structlog.contextvars.bound_contextvars(
        **{key: value for key, value in fields.items() if value is not None}
    ):
        yield

"""Logging configuration for overview_printer."""

from overview_printer.logging.config import configure_logging, render_context

__all__ = ["configure_logging", "render_context"]

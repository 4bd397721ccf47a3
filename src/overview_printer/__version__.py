"""Version information for overview_printer."""

__version__ = "0.3.0"

"""Resource view printer: turns Kubernetes objects into display component trees."""

from overview_printer.__version__ import __version__

__all__ = ["__version__"]

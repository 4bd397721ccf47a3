"""Object store and link resolver collaborators."""

from overview_printer.store.interfaces import Key, LinkResolver, ObjectStore
from overview_printer.store.links import OverviewPathResolver
from overview_printer.store.manifest import ManifestObjectStore

__all__ = [
    "Key",
    "LinkResolver",
    "ManifestObjectStore",
    "ObjectStore",
    "OverviewPathResolver",
]

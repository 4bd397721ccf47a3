"""Resource printers: typed Kubernetes objects to component trees."""

from overview_printer.printer.base import KindPrinter
from overview_printer.printer.deployment import (
    DeploymentConfiguration,
    DeploymentPrinter,
    DeploymentStatus,
    deployment_handler,
    deployment_list_handler,
    deployment_pods,
    edit_deployment_action,
)
from overview_printer.printer.hooks import hookimpl
from overview_printer.printer.options import PrintOptions, RenderContext
from overview_printer.printer.registry import PrinterRegistry, default_registry
from overview_printer.printer.replicaset import (
    ReplicaSetConfiguration,
    ReplicaSetPrinter,
    ReplicaSetStatus,
    edit_replica_set_action,
    replica_set_handler,
    replica_set_list_handler,
    replica_set_pods,
)
from overview_printer.printer.summary import (
    ActionGenerator,
    ConfigurationSummarizer,
    SelectorGenerator,
    SpecIntGenerator,
)

__all__ = [
    "ActionGenerator",
    "ConfigurationSummarizer",
    "DeploymentConfiguration",
    "DeploymentPrinter",
    "DeploymentStatus",
    "KindPrinter",
    "PrintOptions",
    "PrinterRegistry",
    "RenderContext",
    "ReplicaSetConfiguration",
    "ReplicaSetPrinter",
    "ReplicaSetStatus",
    "SelectorGenerator",
    "SpecIntGenerator",
    "default_registry",
    "deployment_handler",
    "deployment_list_handler",
    "deployment_pods",
    "edit_deployment_action",
    "edit_replica_set_action",
    "hookimpl",
    "replica_set_handler",
    "replica_set_list_handler",
    "replica_set_pods",
]

"""Main CLI entry point using Typer."""

from __future__ import annotations

from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from overview_printer import __version__
from overview_printer.cli.output import OutputFormat, get_formatter
from overview_printer.component import Component
from overview_printer.config import PrinterConfig, load_config
from overview_printer.exceptions import InvalidArgumentError, PrinterError
from overview_printer.logging.config import configure_logging, render_context
from overview_printer.printer import PrintOptions, default_registry
from overview_printer.store import Key, ManifestObjectStore, ObjectStore, OverviewPathResolver
from overview_printer.store.cluster import ClusterObjectStore

app = typer.Typer(
    name="overview-printer",
    help="Render Kubernetes resources as overview component trees.",
    add_completion=False,
)

console = Console()
logger = structlog.get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"overview-printer version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
    log_json: bool = typer.Option(
        False,
        "--log-json",
        help="Write logs to stderr as JSON lines.",
    ),
) -> None:
    """Overview printer - turn resource manifests into view trees."""
    configure_logging(verbose=verbose, debug=debug, json_output=log_json)


@app.command()
def render(
    manifest: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="YAML manifest holding the resources and their pods. "
        "Reads from the current cluster when omitted.",
    ),
    kind: str = typer.Option(..., "--kind", "-k", help="Resource kind, e.g. Deployment."),
    name: str | None = typer.Option(
        None, "--name", "-n", help="Render this object's detail view instead of the list."
    ),
    namespace: str | None = typer.Option(
        None, "--namespace", help="Namespace to read from (default from config)."
    ),
    output: OutputFormat | None = typer.Option(
        None, "--output", "-o", help="Output format (default from config)."
    ),
) -> None:
    """Render a kind's list table, or one object's detail layout."""
    try:
        config = PrinterConfig.from_env(load_config())
    except ValueError as e:
        console.print(f"[red]Error:[/red] invalid configuration: {escape(str(e))}")
        raise typer.Exit(1) from None

    formatter = get_formatter(output or OutputFormat(config.output_format), console)
    ns = namespace or config.namespace

    with render_context(kind, name=name, namespace=ns):
        try:
            component = _render(manifest, kind, name, ns, config)
        except PrinterError as e:
            logger.debug("render_failed", error=str(e))
            formatter.format_error(str(e))
            raise typer.Exit(1) from None

    formatter.format_component(component)


def _render(
    manifest: Path | None, kind: str, name: str | None, namespace: str, config: PrinterConfig
) -> Component:
    store: ObjectStore
    if manifest is None:
        store = ClusterObjectStore(config)
    else:
        store = ManifestObjectStore.from_paths([manifest], default_namespace=namespace)
    registry = default_registry()
    printer = registry.get(kind)
    options = PrintOptions(
        object_store=store,
        link=OverviewPathResolver(config.path_prefix),
    )
    key = Key(namespace=namespace, api_version=printer.api_version, kind=kind, name=name)

    if name is None:
        return registry.print_list(kind, store.list(key), options)

    obj = store.get(key)
    if obj is None:
        raise InvalidArgumentError(
            f"{kind} not found", resource_type=kind, resource_name=name, namespace=namespace
        )
    return registry.print_object(kind, obj, options)


if __name__ == "__main__":
    app()

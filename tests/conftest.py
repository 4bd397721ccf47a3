"""Shared pytest fixtures for overview_printer tests."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import structlog
import typer
from typer.testing import CliRunner

from overview_printer.cli.main import app
from overview_printer.printer import PrintOptions, RenderContext
from overview_printer.store import LinkResolver, ObjectStore


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("OVERVIEW_PRINTER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None]:
    """Drop handlers and structlog configuration added during a test."""
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def object_store() -> MagicMock:
    """Object store fake; tests set ``list.return_value`` or ``side_effect``."""
    store = MagicMock(spec=ObjectStore)
    store.list.return_value = []
    return store


@pytest.fixture
def link_resolver() -> MagicMock:
    """Link resolver that returns ``/path`` for everything."""
    link = MagicMock(spec=LinkResolver)
    link.path_for.return_value = "/path"
    return link


@pytest.fixture
def print_options(object_store: MagicMock, link_resolver: MagicMock) -> PrintOptions:
    """Print options wired to the store and link fakes."""
    return PrintOptions(
        object_store=object_store,
        link=link_resolver,
        context=RenderContext(request_id="test"),
    )


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app

"""Unit tests for configuration summarizers and generators."""

from __future__ import annotations

from typing import Any

import pytest

from overview_printer.component import Component, Text
from overview_printer.exceptions import ConfigurationError
from overview_printer.printer.summary import (
    ActionGenerator,
    ConfigurationSummarizer,
    SelectorGenerator,
    SpecIntGenerator,
)
from tests.builders import create_deployment


class _FailingGenerator(ActionGenerator):
    header = "Broken"

    def content(self, resource: Any) -> Component | None:
        raise RuntimeError("boom")


class _Summarizer(ConfigurationSummarizer):
    resource_type = "Deployment"
    default_generators = (SpecIntGenerator("Replicas", "replicas"),)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestGenerators:
    """Test the reusable generators."""

    def test_spec_int_default(self) -> None:
        """Unset fields render the default when one is given."""
        generator = SpecIntGenerator("Min Ready Seconds", "min_ready_seconds", default=0)
        section = generator.generate(create_deployment())
        assert section is not None
        assert (section.header, section.content) == ("Min Ready Seconds", Text(value="0"))

    def test_spec_int_omitted(self) -> None:
        """Unset fields without a default produce no section."""
        assert SpecIntGenerator("Replicas", "replicas").generate(create_deployment()) is None

    def test_selector_omitted_when_empty(self) -> None:
        """An empty selector produces no section."""
        deployment = create_deployment()
        deployment.spec.selector.match_labels = None
        assert SelectorGenerator().generate(deployment) is None

    def test_generators_are_values(self) -> None:
        """Generators compare by configuration."""
        assert SpecIntGenerator("Replicas", "replicas") == SpecIntGenerator("Replicas", "replicas")


@pytest.mark.unit
@pytest.mark.kubernetes
class TestConfigurationSummarizer:
    """Test ConfigurationSummarizer."""

    def test_defaults_used(self) -> None:
        """Without explicit generators the class defaults run."""
        deployment = create_deployment()
        deployment.spec.replicas = 2
        summary = _Summarizer(deployment).create()
        assert summary.headers() == ["Replicas"]

    def test_generator_failure_wrapped(self) -> None:
        """Unexpected generator errors become ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Broken") as exc_info:
            _Summarizer(create_deployment(), [_FailingGenerator()]).create()
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.resource_name == "deployment"

    def test_failure_aborts_remaining_generators(self) -> None:
        """No partial summary is returned when a generator fails."""
        deployment = create_deployment()
        deployment.spec.replicas = 2
        generators = [SpecIntGenerator("Replicas", "replicas"), _FailingGenerator()]
        with pytest.raises(ConfigurationError):
            _Summarizer(deployment, generators).create()

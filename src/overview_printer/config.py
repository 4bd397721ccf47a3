"""Printer configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

CONFIG_FILE = Path.home() / ".config" / "overview-printer" / "config.yaml"
ENV_PREFIX = "OVERVIEW_PRINTER_"


class PrinterConfig(BaseModel):
    """Configuration for rendering and for the cluster-backed object store."""

    model_config = ConfigDict(extra="forbid")

    kubeconfig: str | None = None
    context: str | None = None
    namespace: str = "default"
    timeout: int = 30
    retry_attempts: int = 3
    output_format: Literal["json", "yaml", "table"] = "json"
    path_prefix: str = "/overview"

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str | None) -> str | None:
        """Expand ~ in kubeconfig path."""
        return str(Path(v).expanduser()) if v else None

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("retry_attempts")
    @classmethod
    def validate_retry_attempts(cls, v: int) -> int:
        """Validate retry_attempts is non-negative."""
        if v < 0:
            raise ValueError("retry_attempts must be non-negative")
        return v

    @field_validator("path_prefix")
    @classmethod
    def validate_path_prefix(cls, v: str) -> str:
        """Normalize the link prefix to a leading slash and no trailing slash."""
        return "/" + v.strip("/") if v.strip("/") else ""

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> PrinterConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            OVERVIEW_PRINTER_KUBECONFIG: Kubeconfig path
            OVERVIEW_PRINTER_CONTEXT: Kubeconfig context
            OVERVIEW_PRINTER_NAMESPACE: Default namespace
            OVERVIEW_PRINTER_TIMEOUT: Store request timeout in seconds
            OVERVIEW_PRINTER_RETRY_ATTEMPTS: Store retry attempts
            OVERVIEW_PRINTER_OUTPUT: Output format (json, yaml, table)
            OVERVIEW_PRINTER_PATH_PREFIX: Prefix for generated links
        """
        config_dict = base_config.copy() if base_config else {}

        overrides = {
            "KUBECONFIG": "kubeconfig",
            "CONTEXT": "context",
            "NAMESPACE": "namespace",
            "TIMEOUT": "timeout",
            "RETRY_ATTEMPTS": "retry_attempts",
            "OUTPUT": "output_format",
            "PATH_PREFIX": "path_prefix",
        }
        for suffix, field_name in overrides.items():
            if value := os.environ.get(f"{ENV_PREFIX}{suffix}"):
                config_dict[field_name] = value

        return cls.model_validate(config_dict)


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load raw configuration values from a YAML file.

    Args:
        path: Config file path. Defaults to ``CONFIG_FILE``.

    Returns:
        The parsed mapping, or an empty dict when the file does not exist.

    Raises:
        ValueError: If the file does not contain a YAML mapping.
    """
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        return {}
    data = yaml.safe_load(config_path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a mapping")
    return data

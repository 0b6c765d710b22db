"""Loader for integration settings stored in YAML files."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError

from mutation_adapter.models.base import Model


class IntegrationSettings(Model):
    """Which integration to use and the options to configure it with."""

    integration: str = Field(..., description="Integration key, e.g. 'unittest'")
    options: Mapping[str, Any] = Field(
        default_factory=dict, description="Options for the integration config"
    )


def load_integration_settings(path: Path) -> IntegrationSettings:
    """Load and validate integration settings from a YAML file.

    Args:
        path: Path to the settings file

    Returns:
        Parsed and validated settings

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML is invalid or doesn't match the schema

    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty config file: {path}")

    try:
        return IntegrationSettings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid integration config schema in {path}: {e}") from e

"""Loading of integrations from entry points."""

import logging
from collections.abc import Mapping
from importlib.metadata import entry_points
from typing import Any

from mutation_adapter.integrations.base import Integration
from mutation_adapter.integrations.manifest import IntegrationManifest

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "mutation_adapter.integrations"


class IntegrationNotFoundError(LookupError):
    """Raised when no integration is registered under a key."""


def load_integration(key: str, options: Mapping[str, Any]) -> Integration[Any]:
    """Build an integration from its key and raw configuration options.

    The options are validated with the integration's own config class, e.g.
    ``load_integration("unittest", {"start_directory": "tests/unit"})``.
    The returned integration still needs ``setup()``.

    Raises:
        IntegrationNotFoundError: If no integration is registered under key
        pydantic.ValidationError: If the options don't fit the config class

    """
    manifest = load_integration_manifest(key)
    config = manifest.config_cls(**options)
    log.info("Loaded integration %s with %r", key, config)
    return manifest.integration_factory(config)


def load_integration_manifest(key: str) -> IntegrationManifest[Any]:
    """Return the manifest published under ``key`` in the entry point group."""
    registered = {entry.name: entry for entry in entry_points(group=ENTRY_POINT_GROUP)}

    if (entry := registered.get(key)) is None:
        raise IntegrationNotFoundError(
            f"Integration '{key}' not found. "
            f"Available integrations: {sorted(registered)}"
        )

    manifest: IntegrationManifest[Any] = entry.load()
    return manifest

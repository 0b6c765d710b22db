"""Integration manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass

from mutation_adapter.config import IntegrationConfig
from mutation_adapter.integrations.base import Integration


@dataclass(frozen=True, kw_only=True)
class IntegrationManifest[ConfigT: IntegrationConfig]:
    """Manifest describing an integration plugin.

    The manifest references the configuration class and the integration
    factory so integrations can be loaded lazily by their key.
    """

    config_cls: type[ConfigT]
    integration_factory: Callable[[ConfigT], Integration[ConfigT]]

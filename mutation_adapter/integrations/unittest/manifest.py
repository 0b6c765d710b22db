"""unittest integration manifest."""

from mutation_adapter.integrations.manifest import IntegrationManifest
from mutation_adapter.integrations.unittest.config import UnittestConfig
from mutation_adapter.integrations.unittest.integration import UnittestIntegration

unittest_manifest = IntegrationManifest(
    config_cls=UnittestConfig,
    integration_factory=UnittestIntegration.from_config,
)

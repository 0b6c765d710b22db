"""unittest integration module."""

from mutation_adapter.integrations.unittest.config import UnittestConfig
from mutation_adapter.integrations.unittest.coverage import cover
from mutation_adapter.integrations.unittest.integration import UnittestIntegration
from mutation_adapter.integrations.unittest.manifest import unittest_manifest
from mutation_adapter.integrations.unittest.reporter import SummaryReporter

__all__ = [
    "SummaryReporter",
    "UnittestConfig",
    "UnittestIntegration",
    "cover",
    "unittest_manifest",
]

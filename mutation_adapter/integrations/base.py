"""Abstract base class for test framework integrations."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence, Set
from dataclasses import dataclass, field
from typing import Any, Self, TextIO

from mutation_adapter.config import IntegrationConfig
from mutation_adapter.index import TestIndex
from mutation_adapter.models.result import Result
from mutation_adapter.models.test import Test
from mutation_adapter.runnable import Reporter, TestGroup
from mutation_adapter.runner import BatchRunner

log = logging.getLogger(__name__)


class DiscoveryError(Exception):
    """Raised when the host framework's tests cannot be discovered."""


class IntegrationNotSetUpError(RuntimeError):
    """Raised when tests are requested before the integration is set up."""


@dataclass(kw_only=True)
class Integration[ConfigT: IntegrationConfig](ABC):
    """Abstract base for test framework integrations.

    Generic type ConfigT is the pydantic configuration of the integration.
    ``setup`` must be called once before any other method; it loads the
    test files and builds the index, which stays fixed afterwards.
    """

    config: ConfigT
    _index: TestIndex | None = field(default=None, init=False, repr=False)

    @abstractmethod
    def discover(self) -> Sequence[TestGroup[Any]]:
        """Load the test files and return a snapshot of all test groups.

        Raises:
            DiscoveryError: If the test files cannot be loaded

        """

    @abstractmethod
    def new_reporter(self, output: TextIO) -> Reporter:
        """Create a fresh reporter writing to the given output sink."""

    def setup(self) -> Self:
        """Discover all tests and build the index."""
        groups = self.discover()
        log.info("Discovered %d test group(s)", len(groups))

        self._index = TestIndex.build(groups, self.config.expression_parser)
        return self

    @property
    def index(self) -> TestIndex:
        if self._index is None:
            raise IntegrationNotSetUpError(
                f"{type(self).__name__} is not set up, call setup() first"
            )
        return self._index

    def all_tests(self) -> Sequence[Test]:
        """All tests exposed by this integration."""
        return self.index.tests

    def run(self, tests: Set[Test]) -> Result:
        """Run the given tests and return the aggregate result."""
        runner = BatchRunner(index=self.index, reporter_factory=self.new_reporter)
        return runner.run(tests)

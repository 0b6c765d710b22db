"""Batch runner executing a set of tests against one shared reporter."""

import io
import logging
import time
from collections.abc import Callable, Sequence, Set
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, TextIO

from mutation_adapter.index import TestIndex
from mutation_adapter.models.result import Result
from mutation_adapter.models.test import Test
from mutation_adapter.runnable import Reporter, TestCase

log = logging.getLogger(__name__)

type ReporterFactory = Callable[[TextIO], Reporter]


@dataclass(frozen=True, kw_only=True)
class BatchRunner:
    """Runs batches of indexed tests and folds them into one result."""

    index: TestIndex
    reporter_factory: ReporterFactory

    def run(self, tests: Set[Test]) -> Result:
        """Run the given tests and return the aggregate result.

        Every test case runs even after a failure so the captured output
        covers the whole batch.

        Args:
            tests: Tests to run, each produced by the index

        Returns:
            Result that passed only if every test case passed

        Raises:
            TestNotFoundError: If any test is unknown to the index

        """
        test_cases = self._resolve(tests)

        output = io.StringIO()
        reporter = self.reporter_factory(output)
        start = time.monotonic()

        log.info("Running batch of %d test case(s)", len(test_cases))
        outcomes = [
            self._run_test_case(test_case, reporter) for test_case in test_cases
        ]
        passed = all(outcomes)
        reporter.report()

        runtime = time.monotonic() - start
        log.info("Batch completed: passed=%s runtime=%.3fs", passed, runtime)

        return Result(
            passed=passed,
            tests=frozenset(tests),
            output=output.getvalue(),
            runtime=runtime,
        )

    def _resolve(self, tests: Set[Test]) -> Sequence[TestCase[Any]]:
        """Resolve all tests up front, in a repeatable order."""
        test_cases = [self.index.resolve(test) for test in tests]
        return sorted(test_cases, key=attrgetter("identification"))

    def _run_test_case(self, test_case: TestCase[Any], reporter: Reporter) -> bool:
        passed = test_case(reporter)
        log.debug("Test case %s passed=%s", test_case.identification, passed)
        return passed

"""Index of all discovered tests to their runnable test cases."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import cached_property
from types import MappingProxyType
from typing import Any

from mutation_adapter.config import ExpressionParser
from mutation_adapter.models.test import Test
from mutation_adapter.runnable import TestCase, TestGroup

log = logging.getLogger(__name__)


class TestNotFoundError(LookupError):
    """Raised when a test was not produced by the index it is resolved against."""

    __test__ = False


@dataclass(frozen=True, kw_only=True)
class TestIndex:
    """Mapping from engine-facing tests to the test cases that run them."""

    __test__ = False

    entries: Mapping[Test, TestCase[Any]]

    @classmethod
    def build(
        cls,
        groups: Iterable[TestGroup[Any]],
        expression_parser: ExpressionParser,
    ) -> "TestIndex":
        """Build the index from a snapshot of the host framework's groups.

        Args:
            groups: Test groups visible at discovery time
            expression_parser: Parses one coverage syntax string

        Returns:
            Index holding one entry per (group, method) pair

        """
        entries: dict[Test, TestCase[Any]] = {}

        for group in groups:
            for method_name in group.methods:
                test_case = TestCase(group=group, method_name=method_name)
                test = construct_test(test_case, expression_parser)
                if test in entries:
                    log.warning("Duplicate test identification: %s", test.id)
                entries[test] = test_case

        log.info("Indexed %d test case(s)", len(entries))
        return cls(entries=MappingProxyType(entries))

    @cached_property
    def tests(self) -> Sequence[Test]:
        """All indexed tests, in discovery order."""
        return tuple(self.entries)

    def resolve(self, test: Test) -> TestCase[Any]:
        """Look up the test case for a test.

        Raises:
            TestNotFoundError: If the test is not part of this index

        """
        try:
            return self.entries[test]
        except KeyError:
            raise TestNotFoundError(f"Test not found in index: {test.id}") from None


def construct_test(
    test_case: TestCase[Any], expression_parser: ExpressionParser
) -> Test:
    """Construct the engine-facing test for a test case."""
    return Test(
        id=test_case.identification,
        expression=tuple(
            expression_parser(syntax) for syntax in test_case.expression_syntax
        ),
    )

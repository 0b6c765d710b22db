"""Models for batch execution results."""

from collections.abc import Set
from dataclasses import dataclass

from mutation_adapter.models.test import Test


@dataclass(frozen=True, kw_only=True)
class Result:
    """Aggregate outcome of running a batch of tests.

    ``tests`` is always the set the caller asked for, so a result can be
    attributed to its request whether it passed or not.
    """

    passed: bool
    tests: Set[Test]
    output: str
    runtime: float

"""Host-framework building blocks: groups, reporters and test cases."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import ClassVar, Protocol


class Reporter(Protocol):
    """Collects outcomes of test executions for one batch."""

    def passed(self) -> bool:
        """Return whether every execution since the previous verdict passed."""
        ...

    def report(self) -> None:
        """Write the accumulated summary to the reporter's output sink."""
        ...


class TestGroup[R: Reporter](ABC):
    """A runnable group of test methods, such as a test class.

    Generic type R is the reporter type the host framework can run
    methods against.
    """

    __test__ = False

    framework: ClassVar[str]

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable name of the group within the host framework."""

    @property
    @abstractmethod
    def methods(self) -> Sequence[str]:
        """Names of the test methods of this group, in discovery order."""

    @abstractmethod
    def expression_syntax(self) -> Sequence[str]:
        """Coverage expressions the group declares, as written."""

    @abstractmethod
    def run_one_method(self, method_name: str, reporter: R) -> None:
        """Run a single test method, recording its outcome in the reporter."""


@dataclass(frozen=True, kw_only=True)
class TestCase[R: Reporter]:
    """One test method of one group."""

    __test__ = False

    group: TestGroup[R]
    method_name: str

    @cached_property
    def identification(self) -> str:
        """Identification string, e.g. ``unittest:pkg.test_mod.TestFoo#test_bar``."""
        return f"{self.group.framework}:{self.group.name}#{self.method_name}"

    @property
    def expression_syntax(self) -> Sequence[str]:
        return self.group.expression_syntax()

    def __call__(self, reporter: R) -> bool:
        """Run the test case and return whether it passed."""
        self.group.run_one_method(self.method_name, reporter)
        return reporter.passed()

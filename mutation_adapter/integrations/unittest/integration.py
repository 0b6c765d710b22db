"""unittest integration implementation."""

import logging
import unittest
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar, TextIO

from mutation_adapter.integrations.base import DiscoveryError, Integration
from mutation_adapter.integrations.unittest.config import UnittestConfig
from mutation_adapter.integrations.unittest.coverage import cover_expressions
from mutation_adapter.integrations.unittest.reporter import SummaryReporter
from mutation_adapter.runnable import TestGroup

log = logging.getLogger(__name__)

# Placeholders such as ModuleSkipped are defined here by the loader
LOADER_MODULE = "unittest.loader"


@dataclass(frozen=True, kw_only=True)
class UnittestGroup(TestGroup[SummaryReporter]):
    """A unittest.TestCase subclass and the test methods discovered on it."""

    framework: ClassVar[str] = "unittest"

    test_class: type[unittest.TestCase]
    method_names: tuple[str, ...]

    @property
    def name(self) -> str:
        return f"{self.test_class.__module__}.{self.test_class.__qualname__}"

    @property
    def methods(self) -> Sequence[str]:
        return self.method_names

    def expression_syntax(self) -> Sequence[str]:
        return cover_expressions(self.test_class)

    def run_one_method(self, method_name: str, reporter: SummaryReporter) -> None:
        """Run one method inside its own suite so class and module fixtures run."""
        suite = unittest.TestSuite([self.test_class(method_name)])
        reporter.reset_fixture_state()
        suite.run(reporter)


@dataclass(kw_only=True)
class UnittestIntegration(Integration[UnittestConfig]):
    """Integration driving the standard library unittest framework."""

    @classmethod
    def from_config(cls, config: UnittestConfig) -> "UnittestIntegration":
        return cls(config=config)

    def discover(self) -> Sequence[UnittestGroup]:
        """Load test modules matching the configured patterns."""
        suites: list[unittest.TestSuite] = []
        errors: list[str] = []

        for pattern in self.config.patterns:
            log.info(
                "Discovering tests: start_directory=%s, pattern=%s",
                self.config.start_directory,
                pattern,
            )
            loader = unittest.TestLoader()
            suites.append(
                loader.discover(
                    start_dir=str(self.config.start_directory),
                    pattern=pattern,
                    top_level_dir=(
                        str(self.config.top_level_directory)
                        if self.config.top_level_directory is not None
                        else None
                    ),
                )
            )
            errors.extend(loader.errors)

        if errors:
            raise DiscoveryError("Failed to load test modules:\n" + "\n".join(errors))

        return collect_groups(suites)

    def new_reporter(self, output: TextIO) -> SummaryReporter:
        return SummaryReporter(output, buffer=self.config.buffer)


def collect_groups(suites: Iterable[unittest.TestSuite]) -> Sequence[UnittestGroup]:
    """Group the tests of loaded suites by test class, in discovery order."""
    methods: dict[type[unittest.TestCase], list[str]] = {}

    for test in iter_tests(suites):
        names = methods.setdefault(type(test), [])
        if test._testMethodName not in names:
            names.append(test._testMethodName)

    return [
        UnittestGroup(test_class=test_class, method_names=tuple(names))
        for test_class, names in methods.items()
    ]


def iter_tests(suites: Iterable[unittest.TestSuite]) -> Iterator[unittest.TestCase]:
    """Flatten nested suites into their test case instances."""
    for suite in suites:
        for test in suite:
            if isinstance(test, unittest.TestSuite):
                yield from iter_tests([test])
            elif type(test).__module__ == LOADER_MODULE:
                log.info("Skipping loader placeholder test: %s", test.id())
            elif isinstance(test, unittest.TestCase):
                yield test

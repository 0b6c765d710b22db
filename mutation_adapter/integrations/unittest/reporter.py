"""Reporter collecting unittest outcomes for one batch."""

from typing import TextIO
from unittest import TestResult


class SummaryReporter(TestResult):
    """Test result that reports per-execution verdicts and a text summary."""

    separator1 = "=" * 70
    separator2 = "-" * 70

    def __init__(self, stream: TextIO, *, buffer: bool = True) -> None:
        super().__init__(stream=stream, descriptions=True, verbosity=0)
        self.stream = stream
        self.buffer = buffer
        self._checkpoint = 0

    def passed(self) -> bool:
        """Return whether nothing failed since the previous verdict."""
        problems = self._problem_count()
        passed = problems == self._checkpoint
        self._checkpoint = problems
        return passed

    def reset_fixture_state(self) -> None:
        """Forget the class and module fixtures of the previous suite run.

        TestSuite tears fixtures down at the end of every top-level run but
        keeps the last test class on the result, so the next run would skip
        setUpClass and setUpModule for the same class.
        """
        self._previousTestClass = None
        self._moduleSetUpFailed = False

    def report(self) -> None:
        """Write failure details and a run summary to the stream.

        Nothing is written when no test ran and nothing went wrong.
        """
        if not self.testsRun and self.wasSuccessful():
            return

        self._write_problems("ERROR", self.errors)
        self._write_problems("FAIL", self.failures)
        for test in self.unexpectedSuccesses:
            self.stream.write(f"{self.separator1}\nUNEXPECTED SUCCESS: {test}\n")

        plural = "" if self.testsRun == 1 else "s"
        self.stream.write(f"{self.separator2}\nRan {self.testsRun} test{plural}\n\n")

        if self.wasSuccessful():
            self.stream.write("OK\n")
            return

        counts = [
            f"{label}={len(items)}"
            for label, items in (
                ("failures", self.failures),
                ("errors", self.errors),
                ("unexpected successes", self.unexpectedSuccesses),
            )
            if items
        ]
        self.stream.write(f"FAILED ({', '.join(counts)})\n")

    def _write_problems(self, flavour: str, problems: list[tuple[object, str]]) -> None:
        for test, traceback in problems:
            self.stream.write(
                f"{self.separator1}\n{flavour}: {test}\n"
                f"{self.separator2}\n{traceback}\n"
            )

    def _problem_count(self) -> int:
        return len(self.failures) + len(self.errors) + len(self.unexpectedSuccesses)

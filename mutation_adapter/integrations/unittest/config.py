"""Configuration for the unittest integration."""

from collections.abc import Sequence
from pathlib import Path

from mutation_adapter.config import IntegrationConfig


class UnittestConfig(IntegrationConfig):
    """Configuration for the unittest integration."""

    start_directory: Path = Path("tests")
    patterns: Sequence[str] = ("test_*.py", "*_test.py")
    top_level_directory: Path | None = None
    # Capture stdout/stderr of tests into the failure output
    buffer: bool = True

"""Fixtures for integration tests."""

import sys
import textwrap
from collections.abc import Callable, Generator
from pathlib import Path

import pytest


@pytest.fixture
def suite_dir(tmp_path: Path) -> Generator[Path]:
    """Create a directory for test modules, unloading them afterwards."""
    directory = tmp_path / "suite"
    directory.mkdir()

    saved_path = list(sys.path)

    yield directory

    sys.path[:] = saved_path
    for name, module in list(sys.modules.items()):
        if (file := getattr(module, "__file__", None)) and Path(file).is_relative_to(
            directory
        ):
            del sys.modules[name]


@pytest.fixture
def write_test_file(suite_dir: Path) -> Callable[[str, str], Path]:
    """Return a function writing dedented test modules into the suite dir."""

    def write(name: str, source: str) -> Path:
        path = suite_dir / name
        path.write_text(textwrap.dedent(source))
        return path

    return write

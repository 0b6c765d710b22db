"""Tests for the test index."""

import logging
from unittest.mock import Mock

import pytest

from mutation_adapter.expression import InvalidExpressionError, parse_expression
from mutation_adapter.index import TestIndex, TestNotFoundError
from mutation_adapter.models.test import Test
from mutation_adapter.testing.factories import TestFactory
from mutation_adapter.testing.fakes import FakeGroup


@pytest.fixture
def groups() -> list[FakeGroup]:
    """Create two groups with three methods in total."""
    return [
        FakeGroup(group_name="A", method_names=("t1", "t2"), failing=frozenset({"t2"})),
        FakeGroup(group_name="B", method_names=("t3",), cover=("app.b", "app.c*")),
    ]


@pytest.fixture
def index(groups: list[FakeGroup]) -> TestIndex:
    """Build an index with the default expression parser."""
    return TestIndex.build(groups, parse_expression)


def test_one_test_per_group_method(index: TestIndex) -> None:
    """Indexes exactly one test per (group, method) pair, in discovery order."""
    assert [test.id for test in index.tests] == ["fw:A#t1", "fw:A#t2", "fw:B#t3"]


def test_tests_are_cached(index: TestIndex) -> None:
    """Returns the same sequence on every access."""
    assert index.tests is index.tests


def test_expressions_are_parsed_per_syntax_string(index: TestIndex) -> None:
    """Parses each declared coverage string into the test expression."""
    test = index.tests[2]

    assert test.expression == (parse_expression("app.b"), parse_expression("app.c*"))


def test_resolves_every_test_to_its_test_case(index: TestIndex) -> None:
    """Every indexed test resolves to the test case with the same identification."""
    for test in index.tests:
        assert index.resolve(test).identification == test.id


def test_resolves_equal_test_built_by_caller(index: TestIndex) -> None:
    """Resolves a test rebuilt from its id alone."""
    test_case = index.resolve(Test(id="fw:A#t2", expression=()))

    assert test_case.group.name == "A"
    assert test_case.method_name == "t2"


def test_raises_for_unknown_test(index: TestIndex) -> None:
    """Raises TestNotFoundError for a test the index never produced."""
    unknown = TestFactory.build(id="fw:Z#missing")

    with pytest.raises(TestNotFoundError, match="fw:Z#missing"):
        index.resolve(unknown)


def test_empty_registry_builds_empty_index() -> None:
    """An empty snapshot yields no tests."""
    index = TestIndex.build([], parse_expression)

    assert index.tests == ()


def test_identification_is_stable_across_builds(groups: list[FakeGroup]) -> None:
    """Building twice yields byte-identical identifications."""
    first = TestIndex.build(groups, parse_expression)
    second = TestIndex.build(groups, parse_expression)

    assert [t.id for t in first.tests] == [t.id for t in second.tests]


def test_build_does_not_run_tests(groups: list[FakeGroup]) -> None:
    """Building only reads groups, it never runs a method."""
    group = Mock(wraps=groups[0])
    group.framework = "fw"
    group.name = "A"
    group.methods = ("t1", "t2")

    TestIndex.build([group], parse_expression)

    group.run_one_method.assert_not_called()
    assert group.expression_syntax.call_count == 2


def test_uses_injected_expression_parser(groups: list[FakeGroup]) -> None:
    """Passes each syntax string through the configured parser."""
    parser = Mock(side_effect=lambda syntax: syntax.upper())

    index = TestIndex.build(groups[:1], parser)

    assert index.tests[0].expression == ("APP.MODULE*",)
    assert parser.call_count == 2


def test_propagates_parser_errors() -> None:
    """Parser failures abort the build."""
    group = FakeGroup(group_name="A", method_names=("t1",), cover=("not valid!",))

    with pytest.raises(InvalidExpressionError):
        TestIndex.build([group], parse_expression)


def test_warns_on_duplicate_identification(caplog: pytest.LogCaptureFixture) -> None:
    """Logs a warning when two test cases share an identification."""
    groups = [
        FakeGroup(group_name="A", method_names=("t1",)),
        FakeGroup(group_name="A", method_names=("t1",), failing=frozenset({"t1"})),
    ]

    with caplog.at_level(logging.WARNING):
        index = TestIndex.build(groups, parse_expression)

    assert "Duplicate test identification: fw:A#t1" in caplog.text
    assert len(index.tests) == 1

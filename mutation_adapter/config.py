"""Configuration shared by all integrations."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ImportString

from mutation_adapter.expression import parse_expression

type ExpressionParser = Callable[[str], Any]


class IntegrationConfig(BaseModel):
    """Base configuration for integrations."""

    # Accepts a callable or a dotted import path such as "pkg.parsers:parse"
    expression_parser: ImportString[Callable[[str], Any]] = parse_expression

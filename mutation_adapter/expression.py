"""Default parser for coverage expressions declared on test groups."""

import re

from pydantic import Field

from mutation_adapter.models.base import Model

EXPRESSION_PATTERN = re.compile(
    r"^(?P<scope>[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)(?P<recursive>\*)?$"
)


class InvalidExpressionError(ValueError):
    """Raised when a coverage expression cannot be parsed."""


class Expression(Model):
    """A dotted Python path, optionally matching everything below it."""

    syntax: str = Field(..., description="Expression as written by the user")
    scope: str = Field(..., description="Dotted path the expression points at")
    recursive: bool = Field(
        default=False, description="Whether nested names are covered too"
    )

    def covers(self, subject: str) -> bool:
        """Check whether a dotted subject name falls under this expression.

        ``pkg.mod.Class`` covers only itself, ``pkg.mod*`` covers
        ``pkg.mod`` and anything nested in it, such as ``pkg.mod.Class.run``.
        """
        if subject == self.scope:
            return True
        return self.recursive and subject.startswith(f"{self.scope}.")


def parse_expression(syntax: str) -> Expression:
    """Parse a coverage expression such as ``pkg.mod.Class.method`` or ``pkg*``.

    Raises:
        InvalidExpressionError: If the syntax is not a dotted path

    """
    if (match := EXPRESSION_PATTERN.match(syntax.strip())) is None:
        raise InvalidExpressionError(f"Invalid coverage expression: {syntax!r}")

    return Expression(
        syntax=syntax,
        scope=match["scope"],
        recursive=match["recursive"] is not None,
    )

"""Engine-facing identity of a single test case."""

from typing import Any

from pydantic import Field

from mutation_adapter.models.base import Model


class Test(Model):
    """Framework-agnostic test identity.

    Two tests are the same test when their ids match, whatever their
    expression holds, so a ``Test`` can be rebuilt by the caller and still
    be resolved by the index that produced it.
    """

    __test__ = False

    id: str = Field(..., description="Identification of the owning test case")
    expression: Any = Field(
        ..., description="Parsed coverage expressions, one per syntax string"
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Test):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

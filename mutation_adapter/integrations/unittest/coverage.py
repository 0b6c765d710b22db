"""Declaration of the code a unittest test class covers."""

from collections.abc import Callable, Sequence

from mutation_adapter.integrations.base import DiscoveryError

COVER_ATTRIBUTE = "__cover_expressions__"


class MissingCoverageError(DiscoveryError):
    """Raised when a test class does not declare what it covers."""


def cover[T: type](*expressions: str) -> Callable[[T], T]:
    """Class decorator declaring the coverage expressions of a test class.

    e.g.
    @cover("shop.cart.Cart*")
    class CartTest(unittest.TestCase):
        ...

    Expressions are added to those inherited from base classes.
    """
    if not expressions:
        raise ValueError("cover() requires at least one expression")

    def decorator(test_class: T) -> T:
        inherited = getattr(test_class, COVER_ATTRIBUTE, ())
        setattr(test_class, COVER_ATTRIBUTE, (*inherited, *expressions))
        return test_class

    return decorator


def cover_expressions(test_class: type) -> Sequence[str]:
    """Return the coverage expressions declared on a test class.

    Raises:
        MissingCoverageError: If the class declares none

    """
    if not (expressions := getattr(test_class, COVER_ATTRIBUTE, ())):
        raise MissingCoverageError(
            f"Cover expression for {test_class.__module__}.{test_class.__qualname__}"
            " is not specified"
        )
    return expressions

"""
Exceptions raised by lazy sets.

Combinators never catch these: an error raised by an operand propagates
unchanged to the caller.
"""


class LazySetError(Exception):
    """Base class for errors raised by lazy sets."""


class DimensionMismatchError(LazySetError, ValueError):
    """
    Raised when a direction or point does not have the ambient dimension
    of the set it is passed to.
    """

    def __init__(self, operation: str, expected: int, actual: int) -> None:
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{operation}: expected a vector of length {expected}, "
            f"got length {actual}."
        )


class UnboundedDirectionError(LazySetError, ArithmeticError):
    """Raised when a set is unbounded in the requested direction."""


class EmptySetError(LazySetError):
    """Raised when a support vector is requested from an empty set."""

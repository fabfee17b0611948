"""Error types for preference and aggregation preconditions."""

from __future__ import annotations


class PreconditionError(ValueError):
    """Error raised when an operation is called outside its domain.

    The name of the rejected operation is preserved for debugging
    purposes.
    """

    def __init__(self, message: str, operation: str) -> None:
        self.operation = operation
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__str__()!r}, operation={self.operation!r})"


class EmptyAlternativesError(PreconditionError):
    """Raised when a selection is requested over no alternatives."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} requires at least one alternative", operation)


class EmptyProfileError(PreconditionError):
    """Raised when a social welfare function is applied to no preferences."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} requires at least one preference", operation)

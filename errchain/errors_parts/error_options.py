"""Optional named construction settings for ``new``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ErrorOptions:
    """Optional fields applied before a node is built.

    Attributes:
        operation: Operation label for the new node (empty when unset).
        cause: Underlying error the new node wraps.
    """

    operation: str = ""
    cause: Optional[BaseException] = None

    def merge(self, other: Optional["ErrorOptions"]) -> "ErrorOptions":
        """Return a copy where ``other``'s set fields win."""
        if other is None:
            return self
        return ErrorOptions(
            operation=other.operation or self.operation,
            cause=other.cause if other.cause is not None else self.cause,
        )


def with_operation(operation: str) -> ErrorOptions:
    return ErrorOptions(operation=operation)


def with_cause(err: Optional[BaseException]) -> ErrorOptions:
    return ErrorOptions(cause=err)


__all__ = ["ErrorOptions", "with_operation", "with_cause"]

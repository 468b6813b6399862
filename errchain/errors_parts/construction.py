"""
Chain constructors.

``new`` starts a chain at a fresh failure. ``wrap`` and
``wrap_with_operation`` add one more link on top of an existing error while
carrying its resolved code and message forward, so each re-raise site can be
stamped with its own operation label.
"""
from __future__ import annotations

from typing import Optional, Union

from .chain_error import ChainError
from .error_code import ErrorCode
from .error_options import ErrorOptions
from .resolution import resolve_code, resolve_message, resolve_operation


def new(
    code: Union[ErrorCode, int],
    message: str,
    *options: Optional[ErrorOptions],
    operation: Optional[str] = None,
    cause: Optional[BaseException] = None,
) -> ChainError:
    """Create a new chain node.

    ``options`` are merged left to right (``None`` entries are skipped); the
    ``operation``/``cause`` keywords override them. No validation is done on
    ``code`` or ``message``.

    Example:
        >>> err = new(ErrorCode.CONFLICT, "An internal error", operation="TestError")
        >>> str(err)
        '6: TestError: An internal error'
    """
    opts = ErrorOptions()
    for opt in options:
        opts = opts.merge(opt)
    opts = opts.merge(ErrorOptions(operation=operation or "", cause=cause))
    return ChainError(code=code, message=message, operation=opts.operation, cause=opts.cause)


def wrap(err: Optional[BaseException]) -> ChainError:
    """Wrap ``err`` in a new node carrying all of its resolved facets."""
    return ChainError(
        code=resolve_code(err),
        message=resolve_message(err),
        operation=resolve_operation(err),
        cause=err,
    )


def wrap_with_operation(operation: str, err: Optional[BaseException]) -> ChainError:
    """Wrap ``err`` under a new operation label, keeping its code and message."""
    return ChainError(
        code=resolve_code(err),
        message=resolve_message(err),
        operation=operation,
        cause=err,
    )


__all__ = ["new", "wrap", "wrap_with_operation"]

"""Error chain public surface.

This module re-exports the one-class-per-file implementations under
``errchain.errors_parts`` to keep a stable import path.
"""

from .errors_parts import (
    GENERIC_MESSAGE,
    HTTP_STATUS_MAP,
    UNSPECIFIED,
    ChainError,
    ErrorCode,
    ErrorOptions,
    code_name,
    coerce_code,
    http_status_for,
    iter_chain,
    new,
    resolve_code,
    resolve_message,
    resolve_operation,
    with_cause,
    with_operation,
    wrap,
    wrap_with_operation,
)

__all__ = [
    "ChainError",
    "ErrorCode",
    "ErrorOptions",
    "GENERIC_MESSAGE",
    "HTTP_STATUS_MAP",
    "UNSPECIFIED",
    "code_name",
    "coerce_code",
    "http_status_for",
    "iter_chain",
    "new",
    "resolve_code",
    "resolve_message",
    "resolve_operation",
    "with_cause",
    "with_operation",
    "wrap",
    "wrap_with_operation",
]

"""Errors parts package public surface.

Re-exports the individual error chain components for optional direct imports.
Prefer importing from `errchain.errors` for the stable surface.
"""

from .error_code import ErrorCode, UNSPECIFIED, code_name, coerce_code
from .chain_error import ChainError
from .error_options import ErrorOptions, with_cause, with_operation
from .resolution import (
    GENERIC_MESSAGE,
    iter_chain,
    resolve_code,
    resolve_message,
    resolve_operation,
)
from .construction import new, wrap, wrap_with_operation
from .http_status import HTTP_STATUS_MAP, http_status_for

__all__ = [
    "ErrorCode",
    "UNSPECIFIED",
    "code_name",
    "coerce_code",
    "ChainError",
    "ErrorOptions",
    "with_cause",
    "with_operation",
    "GENERIC_MESSAGE",
    "iter_chain",
    "resolve_code",
    "resolve_message",
    "resolve_operation",
    "new",
    "wrap",
    "wrap_with_operation",
    "HTTP_STATUS_MAP",
    "http_status_for",
]

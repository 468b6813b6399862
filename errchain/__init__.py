"""errchain package

Structured error chains: every failure carries a stable code, a message, an
operation label and the error it wraps, and any of those can be recovered
from an error of unknown origin by walking the chain.

Public API (re-exported):
    - Version: ``__version__``
    - Types: :class:`ChainError`, :class:`ErrorCode`, :class:`ErrorOptions`
    - Constructors: :func:`new`, :func:`wrap`, :func:`wrap_with_operation`
    - Resolvers: :func:`resolve_code`, :func:`resolve_message`,
      :func:`resolve_operation`
    - Transport: :func:`http_status_for`

The FastAPI adapter lives in ``errchain.service`` and is not imported here.
"""

from .errors import (
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
from .dto import ErrorBodyDTO

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChainError",
    "ErrorBodyDTO",
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

"""
ErrorCode to HTTP status mapping.

Pure lookup used by transport adapters; the error model itself knows nothing
about HTTP.
"""
from __future__ import annotations

from http import HTTPStatus
from types import MappingProxyType
from typing import Any, Mapping

from .error_code import ErrorCode

# Non-standard "client closed request" status used for cancellations.
CLIENT_CLOSED_REQUEST = 499

HTTP_STATUS_MAP: Mapping[ErrorCode, int] = MappingProxyType(
    {
        ErrorCode.OK: HTTPStatus.OK,
        ErrorCode.CANCELLED: CLIENT_CLOSED_REQUEST,
        ErrorCode.UNKNOWN: HTTPStatus.INTERNAL_SERVER_ERROR,
        ErrorCode.INVALID_ARGUMENT: HTTPStatus.BAD_REQUEST,
        ErrorCode.DEADLINE_EXCEEDED: HTTPStatus.REQUEST_TIMEOUT,
        ErrorCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
        ErrorCode.CONFLICT: HTTPStatus.CONFLICT,
        ErrorCode.NOT_AUTHORIZED: HTTPStatus.FORBIDDEN,
        ErrorCode.RESOURCE_EXHAUSTED: HTTPStatus.TOO_MANY_REQUESTS,
        ErrorCode.FAILED_PRECONDITION: HTTPStatus.PRECONDITION_FAILED,
        ErrorCode.ABORTED: HTTPStatus.CONFLICT,
        ErrorCode.OUT_OF_RANGE: HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE,
        ErrorCode.UNIMPLEMENTED: HTTPStatus.NOT_IMPLEMENTED,
        ErrorCode.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
        ErrorCode.UNAVAILABLE: HTTPStatus.SERVICE_UNAVAILABLE,
        ErrorCode.DATA_LOSS: HTTPStatus.INTERNAL_SERVER_ERROR,
        ErrorCode.UNAUTHENTICATED: HTTPStatus.UNAUTHORIZED,
    }
)


def http_status_for(code: Any) -> int:
    """Return the conventional HTTP status for ``code`` (500 when unrecognized)."""
    if isinstance(code, bool) or not isinstance(code, int):
        return int(HTTPStatus.INTERNAL_SERVER_ERROR)
    try:
        member = ErrorCode(code)
    except ValueError:
        return int(HTTPStatus.INTERNAL_SERVER_ERROR)
    return int(HTTP_STATUS_MAP[member])


__all__ = ["HTTP_STATUS_MAP", "CLIENT_CLOSED_REQUEST", "http_status_for"]

"""FastAPI exception handlers rendering error chains as JSON responses.

``ChainError`` instances map to the HTTP status of their resolved code; any
other exception is wrapped first, so it surfaces as ``internal``/500 with the
generic message and never leaks its own text.

Response shape::

    {"error": {"code": 5, "name": "not_found", "message": "...", "operation": "..."}}
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..dto.error_body import error_body
from ..errors_parts.chain_error import ChainError
from ..errors_parts.construction import wrap
from ..logging import LogContext, get_logger, log_error


def error_response(err: BaseException, *, expose_cause: bool = False) -> JSONResponse:
    """Build the JSON response for ``err`` without logging it."""
    node = err if isinstance(err, ChainError) else wrap(err)
    return JSONResponse(
        status_code=node.http_status,
        content={"error": error_body(node, include_cause=expose_cause)},
    )


def install_error_handlers(
    app: FastAPI,
    *,
    service: str = "errchain",
    expose_cause: Optional[bool] = None,
) -> None:
    """Register error-chain handlers on ``app``.

    ``expose_cause`` defaults to the ``expose_cause`` setting; when false the
    nested ``cause`` objects are omitted from response bodies.
    """
    if expose_cause is None:
        expose_cause = get_settings().expose_cause
    logger = get_logger(f"service.{service}")

    def _ctx(request: Request) -> LogContext:
        return LogContext(
            service=service,
            request_id=request.headers.get("x-request-id"),
            extra={"method": request.method, "path": request.url.path},
        )

    @app.exception_handler(ChainError)
    async def _chain_error_handler(request: Request, exc: ChainError) -> JSONResponse:
        log_error(logger, exc, "request.error", _ctx(request))
        return error_response(exc, expose_cause=expose_cause)

    @app.exception_handler(Exception)
    async def _unhandled_exc_handler(request: Request, exc: Exception) -> JSONResponse:
        log_error(logger, exc, "request.unhandled_exception", _ctx(request))
        return error_response(exc, expose_cause=expose_cause)


__all__ = ["error_response", "install_error_handlers"]

"""Structured logging utilities for errchain.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in adapters.

``log_error`` is the bridge from the error model to logs: it resolves the
code, message and operation of any error value and emits them as one
structured event, together with the operation trail of the chain.
"""
from __future__ import annotations

import contextlib
import json
import logging
import sys
from typing import Any, List, Optional

from .config import get_settings
from .config.defaults import ERRCHAIN_LOGGER_NAME
from .errors_parts.chain_error import ChainError
from .errors_parts.error_code import code_name
from .errors_parts.http_status import http_status_for
from .errors_parts.resolution import (
    iter_chain,
    resolve_code,
    resolve_message,
    resolve_operation,
)
from .log_support import JsonFormatter, LogContext

_BASE_LOGGER_ATTR = "_errchain_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_errchain_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | int | None, default: int = logging.INFO) -> int:
    """Parse a level name (``"debug"``, ``"WARN"``) or number; ``default`` if unknown."""
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    text = value.strip().upper()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text)
    return level if isinstance(level, int) else default


def _make_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger(json_mode: Optional[bool], level: int) -> logging.Logger:
    """Initialize (or refresh) and return the shared ``errchain`` logger."""
    settings = get_settings()
    desired_level = _parse_level(settings.log_level, default=level)
    use_json = settings.log_json if json_mode is None else json_mode

    logger = logging.getLogger(ERRCHAIN_LOGGER_NAME)
    logger.setLevel(desired_level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            # capsys and similar swap sys.stderr; rebind so records follow it
            logger.removeHandler(existing)
            with contextlib.suppress(Exception):
                existing.close()
            logger.addHandler(_make_handler(use_json, desired_level))
        return logger

    logger.handlers[:] = [_make_handler(use_json, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(
    name: str = ERRCHAIN_LOGGER_NAME,
    json_mode: Optional[bool] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Return a logger under the shared ``errchain`` logger.

    ``ERRCHAIN_LOG_LEVEL`` / ``ERRCHAIN_LOG_JSON`` (or the config file) take
    precedence over ``level``; an explicit ``json_mode`` wins over config.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == ERRCHAIN_LOGGER_NAME:
        return base_logger
    if not name.startswith(ERRCHAIN_LOGGER_NAME + "."):
        name = f"{ERRCHAIN_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit one structured event as a single JSON line.

    ``None``-valued fields are dropped to keep payloads concise.
    """
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def operation_trail(err: Optional[BaseException]) -> List[str]:
    """Operation labels of every chain node, outermost first (empty ones skipped)."""
    return [
        link.operation
        for link in iter_chain(err)
        if isinstance(link, ChainError) and link.operation
    ]


def log_error(
    logger: logging.Logger,
    err: Optional[BaseException],
    event: str = "error",
    ctx: LogContext | None = None,
    *,
    level: int = logging.ERROR,
    **fields: Any,
) -> None:
    """Log the resolved facets of ``err`` as a structured event.

    Works for chain nodes and foreign errors alike; foreign errors also get
    their class name under ``error_type``.
    """
    code = resolve_code(err)
    foreign = None
    for link in iter_chain(err):
        if not isinstance(link, ChainError):
            foreign = type(link).__name__
    log_event(
        logger,
        event,
        ctx,
        level=level,
        error_code=int(code),
        code_name=code_name(code),
        operation=resolve_operation(err) or None,
        message=resolve_message(err),
        http_status=http_status_for(code),
        chain=operation_trail(err) or None,
        error_type=foreign,
        **fields,
    )


__all__ = [
    "LogContext",
    "get_logger",
    "log_event",
    "log_error",
    "operation_trail",
]

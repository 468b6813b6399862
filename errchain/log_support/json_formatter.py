"""JSON logging formatter used by errchain logging setup.

This module defines :class:`JsonFormatter`, a minimal JSON formatter that
serializes standard logging fields and merges non-internal extra attributes
from the ``LogRecord``. Records logged with exception info (``logger.exception``)
gain the resolved ``error_code``, ``code_name`` and ``operation`` of that
exception, and any ``error_code`` field is paired with its ``code_name``.
"""
from __future__ import annotations

import contextlib
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..errors_parts.error_code import code_name
from ..errors_parts.resolution import resolve_code, resolve_operation

ISO = "%Y-%m-%dT%H:%M:%S.%fZ"

_RECORD_INTERNALS = frozenset(
    (
        "msg",
        "args",
        "levelname",
        "levelno",
        "name",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    )
)


def _add_error_facets(base: Dict[str, Any], exc: Optional[BaseException]) -> None:
    """Attach the resolved code/operation of a logged exception.

    Explicit fields already on the record win.
    """
    if exc is None:
        return
    code = resolve_code(exc)
    base.setdefault("error_code", int(code))
    base.setdefault("code_name", code_name(code))
    operation = resolve_operation(exc)
    if operation:
        base.setdefault("operation", operation)


class JsonFormatter(logging.Formatter):
    """Lightweight JSON formatter for structured logs.

    Emits timestamp, level, logger name and message. A message that is itself
    a JSON object (as produced by ``log_event``) is hoisted to top-level keys
    so lines are not double encoded. Extra record attributes are merged in.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": datetime.now(timezone.utc).strftime(ISO),
            "level": record.levelname,
            "logger": record.name,
        }
        msg_text = record.getMessage()
        base["msg"] = msg_text
        with contextlib.suppress(ValueError):
            parsed = json.loads(msg_text)
            if isinstance(parsed, dict):
                base.update(parsed)
        for k, v in record.__dict__.items():
            if k.startswith("_") or k in _RECORD_INTERNALS:
                continue
            if k not in base:
                base[k] = v
        if record.exc_info:
            _add_error_facets(base, record.exc_info[1])
            base["exc"] = self.formatException(record.exc_info)
        if "error_code" in base and "code_name" not in base:
            base["code_name"] = code_name(base["error_code"])
        return json.dumps(base, ensure_ascii=False, default=str)


__all__ = ["JsonFormatter", "ISO"]

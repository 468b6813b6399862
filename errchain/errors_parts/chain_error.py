"""
Structured chain error type.

A ``ChainError`` is one link of a causal error chain: its own code, message
and operation label plus the (optional) error it wraps. Nodes are built by
``new``/``wrap``/``wrap_with_operation`` and never mutated afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .error_code import ErrorCode, code_name, coerce_code


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:
        return f"<unprintable {type(x).__name__}>"


@dataclass(eq=False, repr=False)
class ChainError(Exception):
    """One link of a causal error chain.

    Attributes:
        code: This node's own :class:`ErrorCode`. ``OK`` means "unset here,
            defer to the cause". Integers outside the enumeration are kept.
        message: Human-readable description at this level; may be empty.
        operation: Name of the operation that raised or re-labeled the error.
        cause: The wrapped error, a ``ChainError`` or any foreign exception.
    """

    code: Union[ErrorCode, int] = ErrorCode.OK
    message: str = ""
    operation: str = ""
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        self.code = coerce_code(self.code)
        super().__init__(self.message)
        if isinstance(self.cause, BaseException):
            self.__cause__ = self.cause

    def get_code(self) -> Union[ErrorCode, int]:
        return self.code

    @property
    def http_status(self) -> int:
        """HTTP status of the code this chain resolves to."""
        from .http_status import http_status_for
        from .resolution import resolve_code

        return http_status_for(resolve_code(self))

    def error(self) -> str:
        """Render the trace: code, operation labels, then the innermost message.

        Every chain node adds its numeric code (when it sets one) and its
        operation label; the walk ends with the last node's own message or
        the text of a foreign cause.
        """
        parts = []
        link: Any = self
        while isinstance(link, ChainError):
            if link.code != ErrorCode.OK:
                parts.append(f"{int(link.code)}: ")
            if link.operation:
                parts.append(f"{link.operation}: ")
            if link.cause is None:
                parts.append(link.message)
            link = link.cause
        if link is not None:
            parts.append(_safe_str(link))
        return "".join(parts)

    def compact(self) -> str:
        """Render only this node as ``operation <code> "message"``."""
        return f'{self.operation} <{code_name(self.code)}> "{self.message}"'

    def to_dict(self, include_cause: bool = True) -> Dict[str, Any]:
        """Return the chain as a JSON-friendly mapping (see ``ErrorBodyDTO``)."""
        from ..dto.error_body import error_body

        return error_body(self, include_cause=include_cause)

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        # cause is summarized by type so deep chains never nest
        cause = "None" if self.cause is None else f"<{type(self.cause).__name__}>"
        return (
            f"ChainError(code={self.code!r}, message={self.message!r}, "
            f"operation={self.operation!r}, cause={cause})"
        )


__all__ = ["ChainError"]

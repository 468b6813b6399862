"""Serializable error body DTO.

Gives a chain node's four fields (code, message, operation, cause) a stable
JSON shape for API error bodies and structured logs. The nested ``cause`` is
optional so adapters decide whether inner links are exposed.

The top-level ``code``/``name`` carry the code the whole chain resolves to,
the same code its HTTP status comes from; nested bodies keep each link's own
code. Bodies are built innermost-first in a loop, so chain depth is bounded
only by memory.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..errors_parts.chain_error import ChainError
from ..errors_parts.error_code import code_name
from ..errors_parts.resolution import (
    GENERIC_MESSAGE,
    iter_chain,
    resolve_code,
    resolve_message,
    resolve_operation,
)


def _link_facets(err: Any, include_cause: bool) -> List[Tuple[Any, str, str]]:
    """(code, message, operation) per link, outermost first.

    A chain node with an empty message shows the message resolved from
    below it; a foreign error shows its resolved facets only.
    """
    if not include_cause:
        if isinstance(err, ChainError):
            return [(err.code, err.message or resolve_message(err), err.operation)]
        return [(resolve_code(err), resolve_message(err), resolve_operation(err))]

    links = list(iter_chain(err)) or [err]
    facets: List[Tuple[Any, str, str]] = []
    inner_message = GENERIC_MESSAGE
    for link in reversed(links):
        if isinstance(link, ChainError):
            if link.cause is None:
                inner_message = link.message or GENERIC_MESSAGE
            else:
                inner_message = link.message or inner_message
            facets.append((link.code, inner_message, link.operation))
        else:
            inner_message = resolve_message(link)
            facets.append((resolve_code(link), inner_message, resolve_operation(link)))
    facets.reverse()
    return facets


def error_body(err: Any, include_cause: bool = True) -> Dict[str, Any]:
    """Plain-dict form of :class:`ErrorBodyDTO` (``None`` fields omitted)."""
    facets = _link_facets(err, include_cause)
    body: Optional[Dict[str, Any]] = None
    for code, message, operation in reversed(facets[1:]):
        item = {"code": int(code), "name": code_name(code), "message": message, "operation": operation}
        if body is not None:
            item["cause"] = body
        body = item
    top_code = resolve_code(err)
    _, message, operation = facets[0]
    top = {"code": int(top_code), "name": code_name(top_code), "message": message, "operation": operation}
    if body is not None:
        top["cause"] = body
    return top


class ErrorBodyDTO(BaseModel):
    """Error envelope for one chain link.

    Attributes:
        code: Integer error code.
        name: Display name of ``code`` (``"unspecified"`` when unrecognized).
        message: Human-readable message.
        operation: Operation label; empty when unset.
        cause: Nested body for the wrapped error, when included.
    """

    code: int
    name: str
    message: str
    operation: str = ""
    cause: Optional["ErrorBodyDTO"] = Field(default=None)

    @classmethod
    def from_error(cls, err: Any, include_cause: bool = True) -> "ErrorBodyDTO":
        """Build a body from any error value.

        Foreign errors are described by their resolved facets only, so their
        raw text never ends up in a response.
        """
        facets = _link_facets(err, include_cause)
        body: Optional[ErrorBodyDTO] = None
        for code, message, operation in reversed(facets[1:]):
            body = cls(code=int(code), name=code_name(code), message=message, operation=operation, cause=body)
        top_code = resolve_code(err)
        _, message, operation = facets[0]
        return cls(code=int(top_code), name=code_name(top_code), message=message, operation=operation, cause=body)


ErrorBodyDTO.model_rebuild()

__all__ = ["ErrorBodyDTO", "error_body"]

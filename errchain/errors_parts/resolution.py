"""
Chain resolution: recover code, message and operation from any error value.

Each resolver walks from the outermost node towards the original failure and
stops at the first node that sets the requested facet. Every link is either a
``ChainError`` (inspect it, then follow ``cause``) or an opaque foreign value
(stop and fall back). ``None`` means "no error" and short-circuits.

Acyclicity of the chain is assumed, not checked.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, TypeVar, Union

from .chain_error import ChainError
from .error_code import ErrorCode

GENERIC_MESSAGE = "An internal error has occurred. Please contact technical support."

T = TypeVar("T")


def iter_chain(err: Optional[BaseException]) -> Iterator[Any]:
    """Yield each link outermost-first, ending with a foreign cause if any."""
    link: Any = err
    while link is not None:
        yield link
        if not isinstance(link, ChainError):
            return
        link = link.cause


def _first_set(
    err: Optional[BaseException],
    facet: Callable[[ChainError], T],
    is_set: Callable[[T], bool],
    absent: T,
    fallback: T,
) -> T:
    if err is None:
        return absent
    for link in iter_chain(err):
        if not isinstance(link, ChainError):
            break
        value = facet(link)
        if is_set(value):
            return value
    return fallback


def resolve_code(err: Optional[BaseException]) -> Union[ErrorCode, int]:
    """Return the first explicit code in the chain.

    ``OK`` for ``None``; ``INTERNAL`` when nothing in the chain sets a code,
    since a non-``None`` error never resolves to success.
    """
    return _first_set(
        err,
        lambda node: node.code,
        lambda code: code != ErrorCode.OK,
        ErrorCode.OK,
        ErrorCode.INTERNAL,
    )


def resolve_message(err: Optional[BaseException]) -> str:
    """Return the first non-empty message in the chain.

    Foreign errors and chains without a message resolve to
    ``GENERIC_MESSAGE`` so their raw text is never surfaced by default.
    """
    return _first_set(err, lambda node: node.message, bool, "", GENERIC_MESSAGE)


def resolve_operation(err: Optional[BaseException]) -> str:
    """Return the first non-empty operation label, or ``""``."""
    return _first_set(err, lambda node: node.operation, bool, "", "")


__all__ = [
    "GENERIC_MESSAGE",
    "iter_chain",
    "resolve_code",
    "resolve_message",
    "resolve_operation",
]

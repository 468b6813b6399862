"""
Application error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every chain node. Integer
values are a stable public contract; the lowercase snake_case display names
are what logs and API bodies show.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional, Union

UNSPECIFIED = "unspecified"


class ErrorCode(IntEnum):
    """Enumerated failure classifications.

    ``OK`` on a chain node means "not set at this level"; resolution skips it
    and keeps looking further down the chain.
    """

    OK = 0  # not an error
    CANCELLED = 1  # cancelled, typically by the caller
    UNKNOWN = 2  # error from an unknown error space
    INVALID_ARGUMENT = 3  # validation failed
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5  # entity does not exist
    CONFLICT = 6  # action cannot be performed
    NOT_AUTHORIZED = 7  # requester lacks permission
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9  # system not in the state the operation requires
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15  # unrecoverable data loss or corruption
    UNAUTHENTICATED = 16

    def __str__(self) -> str:
        return self.name.lower()

    def __format__(self, format_spec: str) -> str:
        # IntEnum formatting changed in 3.11; always format the display name
        return format(str(self), format_spec)

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["ErrorCode"]:
        """Return the member whose display name is ``name``, or ``None``."""
        if not name:
            return None
        return cls.__members__.get(name.strip().upper())


def coerce_code(value: Union[ErrorCode, int]) -> Union[ErrorCode, int]:
    """Return the matching ``ErrorCode`` member, or ``value`` unchanged.

    Integers outside the enumeration are accepted as-is so callers never get
    an exception for an unfamiliar code.
    """
    if isinstance(value, ErrorCode):
        return value
    try:
        return ErrorCode(value)
    except (ValueError, TypeError):
        return value


def code_name(value: Any) -> str:
    """Display name for any code value; ``"unspecified"`` when unrecognized."""
    if isinstance(value, bool):
        return UNSPECIFIED
    if isinstance(value, ErrorCode):
        return str(value)
    if isinstance(value, int):
        try:
            return str(ErrorCode(value))
        except ValueError:
            return UNSPECIFIED
    return UNSPECIFIED


__all__ = ["ErrorCode", "UNSPECIFIED", "coerce_code", "code_name"]

"""Exception hierarchy for msgwire.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from MsgwireError for easy catching of any msgwire-specific error.
"""

from __future__ import annotations


class MsgwireError(Exception):
    """Base exception for all msgwire errors."""

    pass


class SchemaError(MsgwireError):
    """Raised when a message class has an invalid tag table.

    Examples:
        - Two fields declare the same wire tag
        - A field has no wire tag
        - Tag outside 1..2**29-1
        - Field type other than str
    """

    pass


class EncodeError(MsgwireError):
    """Raised when encoding a message fails.

    Only reachable when a field holds a value that bypassed validation, e.g.
    a message built with ``model_construct``: a non-str value, or text with
    lone surrogates that UTF-8 cannot represent.
    """

    pass


class DecodeError(MsgwireError):
    """Base class for failures while decoding binary data."""

    pass


class MalformedInput(DecodeError):
    """Raised when the byte stream is truncated or corrupt.

    Examples:
        - Truncated tag or varint
        - Varint longer than 10 bytes
        - Declared length exceeds the remaining bytes
        - Unknown wire type or unterminated group
        - Invalid UTF-8 in a text field

    Attributes:
        offset: Byte offset where the problem was detected, if known
    """

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at byte {offset})"
        super().__init__(message)
        self.offset = offset

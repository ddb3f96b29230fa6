"""Message size calculation utilities.

This module provides functions to calculate the encoded size of messages
without actually encoding them.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.schema import FieldSchema, MessageSchema
from ..codec.wire import WireType, make_tag, varint_size
from ..exceptions import EncodeError


def encoded_size(message: BaseModel) -> int:
    """Calculate the encoded size of a message in bytes.

    Unlike a fixed-layout format the size depends on the field values: unset
    fields cost nothing and set fields cost their tag, length and UTF-8 bytes.

    Args:
        message: Message instance to calculate size for

    Returns:
        Size in bytes, equal to ``len(encode(message))``

    Raises:
        SchemaError: If schema is invalid
        EncodeError: If a field holds text that is not encodable

    Example:
        >>> encoded_size(Message(id="m1", subject="Hi"))
        8
    """
    total = sum(field_sizes(message).values())
    if getattr(type(message), "msgwire_keep_unknown", False):
        total += len(getattr(message, "unknown_fields", b""))
    return total


def field_sizes(message: BaseModel) -> dict[str, int]:
    """Get the encoded size in bytes of each field in a message.

    Args:
        message: Message instance to analyze

    Returns:
        Dictionary mapping field names to their size in bytes (0 when unset)

    Example:
        >>> field_sizes(Message(id="m1"))["id"]
        4
    """
    schema = MessageSchema.from_model(type(message))
    return {
        field.name: _entry_size(field, getattr(message, field.name)) for field in schema.fields
    }


def _entry_size(field_schema: FieldSchema, value: str) -> int:
    if value == field_schema.default:
        return 0
    try:
        payload_length = len(value.encode("utf-8"))
    except UnicodeEncodeError as e:
        raise EncodeError(f"Field {field_schema.name}: text is not encodable as UTF-8: {e}") from e
    tag = make_tag(field_schema.tag, WireType.LENGTH_DELIMITED)
    return varint_size(tag) + varint_size(payload_length) + payload_length

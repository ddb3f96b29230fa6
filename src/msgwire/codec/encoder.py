"""Wire-format encoder for Pydantic messages.

This module provides the encode() function that converts a message instance to
tag-delimited binary form. Fields are written in ascending tag order and fields
holding their default value are left out entirely.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..exceptions import EncodeError
from .schema import MessageSchema
from .wire import WireWriter


def encode(message: BaseModel) -> bytes:
    """Encode a message to wire format.

    Encoding is deterministic: the same field values always produce the same
    bytes, whatever order they were assigned in. A message with every field at
    its default encodes to ``b""``.

    Args:
        message: Message instance to encode

    Returns:
        Binary representation

    Raises:
        SchemaError: If the message's tag table is invalid
        EncodeError: If a field holds a value that is not encodable text

    Example:
        >>> msg = Message(id="m1", subject="Hi")
        >>> encode(msg)
        b'\\n\\x02m12\\x02Hi'
    """
    writer = WireWriter()
    encode_to_writer(message, writer)
    return writer.to_bytes()


def encode_to_writer(message: BaseModel, writer: WireWriter) -> None:
    """Append the entries of a message to an existing writer.

    Args:
        message: Message instance to encode
        writer: WireWriter to append to

    Raises:
        SchemaError: If the message's tag table is invalid
        EncodeError: If a field holds a value that is not encodable text
    """
    schema = MessageSchema.from_model(type(message))

    for field_schema in schema.fields:
        value = getattr(message, field_schema.name)
        if not isinstance(value, str):
            raise EncodeError(
                f"Field {field_schema.name}: expected str, got {type(value).__name__}"
            )
        if value == field_schema.default:
            continue

        try:
            payload = value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodeError(f"Field {field_schema.name}: text is not encodable as UTF-8: {e}") from e
        writer.write_length_delimited(field_schema.tag, payload)

    # Entries kept from a previous decode go after the known fields
    if getattr(type(message), "msgwire_keep_unknown", False):
        writer.write_raw(getattr(message, "unknown_fields", b""))

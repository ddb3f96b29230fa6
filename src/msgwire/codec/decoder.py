"""Wire-format decoder for Pydantic messages.

This module provides the decode() function that converts tag-delimited binary
data back to a message instance.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import BaseModel

from ..exceptions import MalformedInput
from ..models.message import Message
from .schema import MessageSchema
from .wire import WireReader, WireType

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def decode(data: bytes, message_class: type[T] = Message) -> T:  # type: ignore[assignment]
    """Decode wire-format data to a message.

    Entries may appear in any order. Fields missing from the data keep their
    default, a field appearing more than once takes its last value, and entries
    with unknown tags (or a known tag with an unexpected wire type) are skipped.

    Args:
        data: Binary data to decode
        message_class: Message class to decode to (default: Message)

    Returns:
        Decoded message instance

    Raises:
        SchemaError: If the message's tag table is invalid
        MalformedInput: If data is truncated or corrupt; no partial message
            is returned

    Example:
        >>> msg = decode(b"\\n\\x02m12\\x02Hi")
        >>> msg.id, msg.subject, msg.email
        ('m1', 'Hi', '')
    """
    reader = WireReader(data)
    message = message_class()
    decode_from_reader(message, reader)
    return message


def decode_from_reader(message: T, reader: WireReader, *, group_number: int | None = None) -> T:
    """Merge entries read from reader into an existing message.

    Reads until the reader is exhausted or, when group_number is given, until
    the END_GROUP entry closing that group. Values already on the message are
    overwritten by entries in the data. Nothing is assigned unless the whole
    read succeeds.

    Args:
        message: Message instance to update in place
        reader: WireReader positioned at the first entry
        group_number: Field number of the enclosing group, if decoding a group

    Returns:
        The updated message

    Raises:
        SchemaError: If the message's tag table is invalid
        MalformedInput: If data is truncated or corrupt
    """
    schema = MessageSchema.from_model(type(message))
    keep_unknown = getattr(type(message), "msgwire_keep_unknown", False)

    field_values: dict[str, str] = {}
    unknown = bytearray()

    while True:
        if reader.at_end():
            if group_number is not None:
                raise MalformedInput(
                    f"Unterminated group for field {group_number}", offset=reader.position()
                )
            break

        entry_start = reader.position()
        field_number, wire_type = reader.read_tag()

        if wire_type == WireType.END_GROUP:
            if group_number is None or field_number != group_number:
                raise MalformedInput(
                    f"Unexpected end of group for field {field_number}", offset=entry_start
                )
            break

        field_schema = schema.field_for_tag(field_number)
        if field_schema is not None and wire_type == field_schema.wire_type:
            field_values[field_schema.name] = reader.read_string()
            continue

        reader.skip_field(field_number, wire_type)
        logger.debug(
            "Skipped unknown field %d (wire type %d) at byte %d",
            field_number,
            wire_type,
            entry_start,
        )
        if keep_unknown:
            unknown.extend(reader.span(entry_start))

    for name, value in field_values.items():
        setattr(message, name, value)
    if keep_unknown and unknown:
        message._unknown_fields = message._unknown_fields + bytes(unknown)  # type: ignore[attr-defined]

    return message

"""msgwire: Notification Message Wire Codec

A Python library for exchanging notification messages (identifiers, contact
details, subject, body and parent reference) as compact tag-delimited binary,
compatible with the protobuf wire format.

Key Features:
- Pydantic-based message record with camelCase wire names
- Unset fields cost zero bytes
- Unknown fields are skipped, so newer producers can add fields
- Pure Python implementation

Quick Start:
    >>> from msgwire import Message, encode, decode
    >>>
    >>> msg = Message(id="m1", userId="u1", subject="Hi", message="Hello world")
    >>> data = encode(msg)
    >>> decoded = decode(data)
    >>> decoded.subject
    'Hi'
"""

from __future__ import annotations

import logging

from .codec import decode, decode_from_reader, encode, encode_to_writer
from .codec.wire import WireReader, WireType, WireWriter
from .exceptions import (
    DecodeError,
    EncodeError,
    MalformedInput,
    MsgwireError,
    SchemaError,
)
from .models import Message, Text, TextField
from .protobuf import to_proto_schema
from .utils import encoded_size, field_sizes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Message",
    "encode",
    "decode",
    "encode_to_writer",
    "decode_from_reader",
    # Field helpers
    "Text",
    "TextField",
    # Wire primitives
    "WireReader",
    "WireWriter",
    "WireType",
    # Exceptions
    "MsgwireError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "MalformedInput",
    # Sizing
    "encoded_size",
    "field_sizes",
    # Protobuf
    "to_proto_schema",
    # Version
    "__version__",
]

"""Tag-delimited binary codec for msgwire.

This module provides encoding and decoding of message models to and from the
protobuf-compatible wire format.
"""

from __future__ import annotations

from .decoder import decode, decode_from_reader
from .encoder import encode, encode_to_writer
from .schema import FieldSchema, MessageSchema

__all__ = [
    "encode",
    "encode_to_writer",
    "decode",
    "decode_from_reader",
    "MessageSchema",
    "FieldSchema",
]

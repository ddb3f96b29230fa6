"""Protobuf interoperability for msgwire.

This module provides .proto declarations for message models.
"""

from __future__ import annotations

from .convert import to_proto_schema

__all__ = [
    "to_proto_schema",
]

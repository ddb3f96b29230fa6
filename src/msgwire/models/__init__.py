"""Pydantic message modeling for msgwire.

This module provides the Message record and the TextField helper used to
declare tagged text fields.
"""

from __future__ import annotations

from .fields import Text, TextField
from .message import Message

__all__ = [
    "Message",
    "Text",
    "TextField",
]

"""Utility functions for msgwire.

This module provides encoded size calculation.
"""

from __future__ import annotations

from .sizing import encoded_size, field_sizes

__all__ = [
    "encoded_size",
    "field_sizes",
]

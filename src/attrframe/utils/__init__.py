"""Utility functions for attrframe.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, field_sizes, payload_size

__all__ = [
    "encoded_size",
    "payload_size",
    "field_sizes",
]

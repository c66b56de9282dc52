"""Length-prefixed framing for attrframe.

This module provides bounded frames: a length prefix followed by a payload
that inner decoders may not read past.
"""

from __future__ import annotations

from .bounded import (
    Frame,
    frame_payload,
    get_with_length,
    length_prefix_size,
    open_frame,
    put_with_length,
    read_length,
    unframe_payload,
    write_length,
)

__all__ = [
    "Frame",
    "open_frame",
    "get_with_length",
    "put_with_length",
    "read_length",
    "write_length",
    "length_prefix_size",
    "frame_payload",
    "unframe_payload",
]

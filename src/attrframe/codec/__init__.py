"""Attribute codec for attrframe.

This module provides the attribute container and the encoder and decoder
that frame it, together with the cursor and sized-writer primitives they
are built on.
"""

from __future__ import annotations

from .attributes import Attributes, are_attributes_known, mk_attributes
from .cursor import ByteReader, ByteWriter
from .decoder import decode, get_attributes
from .dispatch import KeyTable, no_fields, no_known_keys
from .encoder import encode, put_attributes, size_attributes, write_attributes
from .schema import AttributeSchema, FieldSchema
from .sized import SizedWriter

__all__ = [
    "Attributes",
    "mk_attributes",
    "are_attributes_known",
    "encode",
    "decode",
    "get_attributes",
    "put_attributes",
    "write_attributes",
    "size_attributes",
    "KeyTable",
    "no_known_keys",
    "no_fields",
    "ByteReader",
    "ByteWriter",
    "SizedWriter",
    "AttributeSchema",
    "FieldSchema",
]

"""Attribute encoder.

This module serializes Attributes into a length-prefixed frame. Known fields
are always emitted in ascending key order, followed by the remainder bytes
verbatim. The decoder only ever advances forward through a frame, so a key
handler that accepts keys in ascending order reads back everything a field
policy emits.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError
from ..framing.bounded import put_with_length
from . import sized
from .attributes import Attributes
from .cursor import ByteWriter
from .dispatch import FieldPolicy
from .sized import SizedWriter

logger = logging.getLogger(__name__)

H = TypeVar("H")


def put_attributes(
    field_policy: FieldPolicy[H],
    attrs: Attributes[H],
    config: CodecConfig = DEFAULT_CONFIG,
) -> SizedWriter:
    """Build the sized writer for an attribute frame.

    Args:
        field_policy: Maps the head to (key, writer) pairs
        attrs: Attributes to serialize
        config: Codec configuration

    Returns:
        SizedWriter emitting length prefix, sorted fields and remainder

    Raises:
        EncodeError: If the policy yields a key outside 0-255
    """
    fields = list(field_policy(attrs.head))
    for key, _writer in fields:
        if not isinstance(key, int) or not 0 <= key <= 0xFF:
            raise EncodeError(f"Attribute key must be an integer 0-255, got {key!r}")

    # sorted() is stable: duplicate keys keep the policy's relative order
    fields = sorted(fields, key=lambda field: field[0])

    parts: list[SizedWriter] = []
    for key, writer in fields:
        parts.append(sized.byte(key))
        parts.append(writer)
    parts.append(sized.raw_bytes(attrs.remainder))

    return put_with_length(sized.concat(*parts), config)


def write_attributes(
    writer: ByteWriter,
    field_policy: FieldPolicy[H],
    attrs: Attributes[H],
    config: CodecConfig = DEFAULT_CONFIG,
) -> None:
    """Write an attribute frame into writer.

    Nothing is written to writer if encoding fails.

    Raises:
        FrameLengthOverflowError: If the payload is too long for the length prefix
        EncodeError: If a field writer fails or misreports its size
    """
    writer.write_bytes(encode(field_policy, attrs, config))


def encode(
    field_policy: FieldPolicy[H],
    attrs: Attributes[H],
    config: CodecConfig = DEFAULT_CONFIG,
) -> bytes:
    """Encode attributes to a length-prefixed frame.

    Args:
        field_policy: Maps the head to (key, writer) pairs
        attrs: Attributes to serialize
        config: Codec configuration

    Returns:
        Framed bytes

    Raises:
        FrameLengthOverflowError: If the payload is too long for the length prefix
        EncodeError: If a field writer fails or misreports its size

    Examples:
        ```python
        from attrframe import encode, no_fields, Attributes

        data = encode(no_fields, Attributes(None, b"\\x01\\x02"))
        assert data == b"\\x02\\x01\\x02"
        ```
    """
    frame = put_attributes(field_policy, attrs, config)
    data = frame.to_bytes()
    logger.debug(
        "Encoded attribute frame of %d bytes (%d remainder bytes)",
        len(data),
        len(attrs.remainder),
    )
    return data


def size_attributes(
    field_policy: FieldPolicy[H],
    attrs: Attributes[H],
    config: CodecConfig = DEFAULT_CONFIG,
) -> int:
    """Return the encoded size of an attribute frame without encoding it.

    Raises:
        FrameLengthOverflowError: If the payload is too long for the length prefix
    """
    return put_attributes(field_policy, attrs, config).size()

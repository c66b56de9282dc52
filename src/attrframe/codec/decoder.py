"""Attribute decoder.

This module provides get_attributes(), which reads one attribute frame from
a reader, and decode(), which reads a whole buffer holding exactly one frame.

Recognition is greedy and order-sensitive: fields are parsed from the front
of the frame for as long as the key handler recognizes the next key. The
first unrecognized key stops recognition, and everything from that key to
the end of the frame becomes the remainder, unparsed.
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import AttrFrameError, DecodeError
from ..framing.bounded import Frame, get_with_length
from .attributes import Attributes
from .cursor import ByteReader
from .dispatch import KeyHandler

logger = logging.getLogger(__name__)

H = TypeVar("H")


def get_attributes(
    reader: ByteReader,
    key_handler: KeyHandler[H],
    frame_limit: Optional[int],
    initial_head: H,
    config: CodecConfig = DEFAULT_CONFIG,
) -> Attributes[H]:
    """Read one attribute frame.

    Args:
        reader: Reader positioned at the frame's length prefix
        key_handler: Maps (key, head) to a continuation, or None if unknown
        frame_limit: Maximum accepted frame length (None = config.max_frame_length)
        initial_head: Head to start from before any field is read
        config: Codec configuration

    Returns:
        Attributes with the recognized head and the unparsed remainder

    Raises:
        MalformedLengthError: If the length prefix can't be parsed
        FrameTooLargeError: If the declared length exceeds the limit
        FrameOverrunError: If a field reads past the end of the frame
        TruncatedInputError: If the input ends before the frame does
        DecodeError: If a field continuation fails
    """
    if frame_limit is None:
        frame_limit = config.max_frame_length

    def read_frame(reader: ByteReader, frame: Frame) -> Attributes[H]:
        remaining = frame.length
        head = initial_head

        while remaining > 0:
            key = reader.peek_byte()
            continuation = key_handler(key, head)
            if continuation is None:
                logger.debug("Unrecognized key %d, %d bytes left as remainder", key, remaining)
                break

            start = reader.position()
            reader.read_byte()
            try:
                head = continuation(reader)
            except AttrFrameError:
                raise
            except Exception as e:
                raise DecodeError(f"Error decoding attribute key {key}: {e}") from e

            # The reader's frame limit keeps consumed <= remaining
            consumed = reader.position() - start
            remaining -= consumed
            logger.debug("Read attribute key %d (%d bytes)", key, consumed)

        remainder = reader.read_bytes(remaining)
        return Attributes(head, remainder)

    return get_with_length(reader, read_frame, frame_limit, config)


def decode(
    data: bytes,
    key_handler: KeyHandler[H],
    initial_head: H,
    *,
    frame_limit: Optional[int] = None,
    config: CodecConfig = DEFAULT_CONFIG,
) -> Attributes[H]:
    """Decode a buffer holding exactly one attribute frame.

    Args:
        data: Framed bytes
        key_handler: Maps (key, head) to a continuation, or None if unknown
        initial_head: Head to start from before any field is read
        frame_limit: Maximum accepted frame length (None = config.max_frame_length)
        config: Codec configuration

    Returns:
        Decoded Attributes

    Raises:
        DecodeError: If data is malformed or continues after the frame

    Examples:
        ```python
        from attrframe import decode, no_known_keys

        attrs = decode(b"\\x05\\x01\\x02\\x03\\x04\\x05", no_known_keys, None)
        assert attrs.remainder == b"\\x01\\x02\\x03\\x04\\x05"
        ```
    """
    reader = ByteReader(data)
    attrs = get_attributes(reader, key_handler, frame_limit, initial_head, config)
    if reader.bytes_available():
        raise DecodeError(f"{reader.bytes_available()} trailing bytes after attribute frame")
    return attrs

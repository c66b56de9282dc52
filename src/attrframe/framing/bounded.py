"""Length-delimited frames.

A frame is a length prefix followed by exactly that many payload bytes:

    frame := length_prefix(payload_len) payload

On the decode side a frame limit is pushed on the reader so inner logic
cannot read past the declared end. Consuming fewer bytes than declared is the
inner decoder's business (the attribute decoder keeps them as its remainder);
consuming more is always a FrameOverrunError.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from ..codec.cursor import ByteReader, ByteWriter
from ..codec.sized import SizedWriter
from ..codec.varint import encode_varint, read_varint, varint_size
from ..config import DEFAULT_CONFIG, FIXED_PREFIX_WIDTHS, CodecConfig
from ..exceptions import (
    EncodeError,
    FrameLengthOverflowError,
    FrameOverrunError,
    FrameTooLargeError,
    FramingError,
    MalformedLengthError,
    TruncatedInputError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Frame:
    """An open frame over a reader.

    Attributes:
        start: Absolute offset of the first payload byte
        length: Declared payload length in bytes
    """

    start: int
    length: int

    @property
    def end(self) -> int:
        """Absolute offset one past the last payload byte."""
        return self.start + self.length

    def remaining(self, reader: ByteReader) -> int:
        """Return how many payload bytes are still unconsumed."""
        return self.end - reader.position()


def length_prefix_size(length: int, config: CodecConfig = DEFAULT_CONFIG) -> int:
    """Return the size of the length prefix for a payload of the given length.

    Raises:
        FrameLengthOverflowError: If length can't be represented by the prefix
    """
    _check_representable(length, config)
    if config.length_prefix == "varint":
        return varint_size(length)
    return FIXED_PREFIX_WIDTHS[config.length_prefix]


def _check_representable(length: int, config: CodecConfig) -> None:
    if length < 0:
        raise FrameLengthOverflowError(f"Frame length must be non-negative, got {length}")
    if length > config.max_length():
        raise FrameLengthOverflowError(
            f"Payload of {length} bytes exceeds {config.length_prefix} length prefix "
            f"(max {config.max_length()})"
        )


def write_length(writer: ByteWriter, length: int, config: CodecConfig = DEFAULT_CONFIG) -> None:
    """Write a length prefix.

    Raises:
        FrameLengthOverflowError: If length can't be represented by the prefix
    """
    _check_representable(length, config)
    if config.length_prefix == "varint":
        writer.write_bytes(encode_varint(length))
    else:
        width = FIXED_PREFIX_WIDTHS[config.length_prefix]
        writer.write_bytes(length.to_bytes(width, config.byte_order))


def read_length(reader: ByteReader, config: CodecConfig = DEFAULT_CONFIG) -> int:
    """Read a length prefix.

    Raises:
        MalformedLengthError: If the prefix is truncated or not a valid encoding
        FrameOverrunError: If the prefix crosses the end of an enclosing frame
    """
    try:
        if config.length_prefix == "varint":
            return read_varint(reader, error=MalformedLengthError)
        width = FIXED_PREFIX_WIDTHS[config.length_prefix]
        return int.from_bytes(reader.read_bytes(width), config.byte_order)
    except TruncatedInputError as e:
        raise MalformedLengthError(f"Truncated {config.length_prefix} length prefix: {e}") from e


@contextmanager
def open_frame(
    reader: ByteReader,
    limit: Optional[int] = None,
    config: CodecConfig = DEFAULT_CONFIG,
) -> Iterator[Frame]:
    """Read a length prefix and bound the reader to the frame it declares.

    Args:
        reader: Reader positioned at the length prefix
        limit: Maximum accepted frame length (None = unrestricted)
        config: Codec configuration (prefix format)

    Yields:
        The open Frame

    Raises:
        MalformedLengthError: If the length prefix can't be parsed
        FrameTooLargeError: If the declared length exceeds limit
        FrameOverrunError: If more than the declared length was consumed
        FramingError: If the body left part of the frame unconsumed

    Example:
        >>> reader = ByteReader(b"\\x02ab")
        >>> with open_frame(reader) as frame:
        ...     body = reader.read_bytes(frame.length)
        >>> body
        b'ab'
    """
    length = read_length(reader, config)
    if limit is not None and length > limit:
        raise FrameTooLargeError(f"Frame length {length} exceeds limit of {limit} bytes")

    frame = Frame(start=reader.position(), length=length)
    logger.debug("Opened frame of %d bytes at offset %d", frame.length, frame.start)

    reader.push_limit(frame.end)
    try:
        yield frame
    finally:
        reader.pop_limit()

    consumed = reader.position() - frame.start
    if consumed > frame.length:
        raise FrameOverrunError(
            f"Frame overrun: consumed {consumed} bytes of a {frame.length}-byte frame"
        )
    if consumed < frame.length:
        raise FramingError(
            f"Frame underrun: {frame.length - consumed} of {frame.length} bytes left unconsumed"
        )


def get_with_length(
    reader: ByteReader,
    inner: Callable[[ByteReader, Frame], T],
    limit: Optional[int] = None,
    config: CodecConfig = DEFAULT_CONFIG,
) -> T:
    """Decode a length-prefixed frame with inner.

    inner receives the reader and the open Frame and must consume exactly
    frame.length bytes.

    Returns:
        Whatever inner returns
    """
    with open_frame(reader, limit, config) as frame:
        return inner(reader, frame)


def put_with_length(payload: SizedWriter, config: CodecConfig = DEFAULT_CONFIG) -> SizedWriter:
    """Wrap a sized writer in a length-prefixed frame.

    The payload length comes from payload.size(), so the payload is written
    once, directly after its prefix.

    Raises:
        FrameLengthOverflowError: If the payload is too long for the prefix
            (raised before anything is written)
        EncodeError: If payload writes a different number of bytes than its size
    """

    def size() -> int:
        length = payload.size()
        return length_prefix_size(length, config) + length

    def write(writer: ByteWriter) -> None:
        length = payload.size()
        write_length(writer, length, config)
        start = len(writer)
        payload.write_into(writer)
        written = len(writer) - start
        if written != length:
            raise EncodeError(
                f"Frame payload reported {length} bytes but wrote {written} bytes"
            )

    return SizedWriter(size, write)


def frame_payload(payload: bytes, config: CodecConfig = DEFAULT_CONFIG) -> bytes:
    """Frame a payload with a length prefix.

    Example:
        >>> frame_payload(b"Hello")
        b'\\x05Hello'
    """
    writer = ByteWriter()
    write_length(writer, len(payload), config)
    writer.write_bytes(payload)
    return writer.to_bytes()


def unframe_payload(
    data: bytes,
    config: CodecConfig = DEFAULT_CONFIG,
    max_length: Optional[int] = None,
) -> bytes:
    """Unframe a whole buffer holding exactly one frame.

    Args:
        data: Framed bytes
        config: Codec configuration (prefix format)
        max_length: Maximum accepted frame length (None = config.max_frame_length)

    Returns:
        The payload

    Raises:
        MalformedLengthError: If the length prefix can't be parsed
        FrameTooLargeError: If the declared length exceeds max_length
        TruncatedInputError: If data ends before the frame does
        FramingError: If data continues after the frame

    Example:
        >>> unframe_payload(b"\\x05Hello")
        b'Hello'
    """
    if max_length is None:
        max_length = config.max_frame_length

    reader = ByteReader(data)
    payload = get_with_length(
        reader, lambda r, frame: r.read_bytes(frame.length), max_length, config
    )
    if reader.bytes_available():
        raise FramingError(f"{reader.bytes_available()} trailing bytes after frame")
    return payload

"""Serializers that know their output length before writing.

A SizedWriter pairs a size() query with a write_into() operation over the
same logical content. Framing uses size() to emit a length prefix without
first materializing the payload, and the encoder uses it to compute frame
sizes without performing any writes.
"""

from __future__ import annotations

from typing import Callable, Literal

from ..exceptions import EncodeError
from .cursor import ByteWriter
from .varint import encode_varint, varint_size


class SizedWriter:
    """A serializer that can report its size before writing.

    Both operations must agree: write_into() emits exactly size() bytes.

    Example:
        >>> writer = concat(uint(7, 2), raw_bytes(b"ab"))
        >>> writer.size()
        4
        >>> writer.to_bytes()
        b'\\x00\\x07ab'
    """

    __slots__ = ("_size", "_write")

    def __init__(self, size: Callable[[], int], write: Callable[[ByteWriter], None]) -> None:
        """Initialize a sized writer.

        Args:
            size: Returns the number of bytes write() emits
            write: Writes the content into a ByteWriter
        """
        self._size = size
        self._write = write

    def size(self) -> int:
        """Return the number of bytes write_into() emits."""
        return self._size()

    def write_into(self, writer: ByteWriter) -> None:
        """Write the content into writer."""
        self._write(writer)

    def to_bytes(self) -> bytes:
        """Materialize the content, checking it against size().

        Raises:
            EncodeError: If the written length disagrees with size()
        """
        expected = self.size()
        writer = ByteWriter()
        self.write_into(writer)
        if len(writer) != expected:
            raise EncodeError(
                f"Sized writer reported {expected} bytes but wrote {len(writer)} bytes"
            )
        return writer.to_bytes()


def empty() -> SizedWriter:
    """Writer that emits nothing."""
    return SizedWriter(lambda: 0, lambda writer: None)


def raw_bytes(data: bytes) -> SizedWriter:
    """Writer that emits data verbatim."""
    data = bytes(data)
    return SizedWriter(lambda: len(data), lambda writer: writer.write_bytes(data))


def byte(value: int) -> SizedWriter:
    """Writer that emits a single byte.

    Raises:
        EncodeError: If value doesn't fit in a byte
    """
    if value < 0 or value > 0xFF:
        raise EncodeError(f"Byte value must be 0-255, got {value}")
    return SizedWriter(lambda: 1, lambda writer: writer.write_byte(value))


def uint(value: int, width: int, byte_order: Literal["big", "little"] = "big") -> SizedWriter:
    """Writer that emits an unsigned integer of fixed width.

    Args:
        value: Unsigned integer value
        width: Width in bytes
        byte_order: "big" or "little"

    Raises:
        EncodeError: If value is negative or doesn't fit in width bytes
    """
    if value < 0:
        raise EncodeError(f"uint requires non-negative value, got {value}")
    if value >= 1 << (8 * width):
        raise EncodeError(f"Value {value} doesn't fit in {width} bytes")
    data = value.to_bytes(width, byte_order)
    return SizedWriter(lambda: width, lambda writer: writer.write_bytes(data))


def varint(value: int) -> SizedWriter:
    """Writer that emits an unsigned varint.

    Raises:
        EncodeError: If value is negative or larger than 64 bits
    """
    try:
        data = encode_varint(value)
    except ValueError as e:
        raise EncodeError(str(e)) from e
    return SizedWriter(lambda: varint_size(value), lambda writer: writer.write_bytes(data))


def concat(*writers: SizedWriter) -> SizedWriter:
    """Writer that emits each writer in order."""

    def write(writer: ByteWriter) -> None:
        for part in writers:
            part.write_into(writer)

    return SizedWriter(lambda: sum(part.size() for part in writers), write)

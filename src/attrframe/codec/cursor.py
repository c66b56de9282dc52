"""Byte-level cursors over in-memory buffers.

This module provides the reader and writer used by the framing and attribute
codecs. The reader is index-based so that a byte can be peeked without being
consumed, and it keeps a stack of frame limits so nested frames cannot be
read past their declared end.
"""

from __future__ import annotations

from ..exceptions import FrameOverrunError, TruncatedInputError


class ByteWriter:
    """Appends bytes to an in-memory buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_byte(0x01)
        >>> writer.write_bytes(b"\\x02\\x03")
        >>> writer.to_bytes()
        b'\\x01\\x02\\x03'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_byte(self, value: int) -> None:
        """Write a single byte.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value doesn't fit in a byte
        """
        if value < 0 or value > 0xFF:
            raise ValueError(f"Byte value must be 0-255, got {value}")
        self._buffer.append(value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes.

        Args:
            data: Bytes to write
        """
        self._buffer.extend(data)

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)


class ByteReader:
    """Reads bytes from an in-memory buffer with an integer offset.

    Reads are checked against two boundaries. Crossing the innermost frame
    limit raises FrameOverrunError; crossing the physical end of the buffer
    raises TruncatedInputError. The frame limit is checked first.

    Example:
        >>> reader = ByteReader(b"\\x05\\x06")
        >>> reader.peek_byte()
        5
        >>> reader.read_byte()
        5
        >>> reader.read_bytes(1)
        b'\\x06'
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read from
        """
        self._data = memoryview(bytes(data))
        self._position = 0
        self._limits: list[int] = []

    def _check(self, num_bytes: int) -> None:
        end = self._position + num_bytes
        if self._limits and end > self._limits[-1]:
            raise FrameOverrunError(
                f"Read of {num_bytes} bytes at offset {self._position} crosses "
                f"frame end at offset {self._limits[-1]}"
            )
        if end > len(self._data):
            raise TruncatedInputError(
                f"Not enough bytes: need {num_bytes}, have {len(self._data) - self._position}"
            )

    def peek_byte(self) -> int:
        """Return the next byte without consuming it.

        Raises:
            FrameOverrunError: If the current frame has no bytes left
            TruncatedInputError: If the buffer is exhausted
        """
        self._check(1)
        return self._data[self._position]

    def read_byte(self) -> int:
        """Read a single byte.

        Raises:
            FrameOverrunError: If the current frame has no bytes left
            TruncatedInputError: If the buffer is exhausted
        """
        self._check(1)
        value = self._data[self._position]
        self._position += 1
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from the buffer

        Raises:
            ValueError: If num_bytes is negative
            FrameOverrunError: If the read crosses the current frame end
            TruncatedInputError: If not enough bytes are available
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be non-negative, got {num_bytes}")
        self._check(num_bytes)
        start = self._position
        self._position += num_bytes
        return bytes(self._data[start : self._position])

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position

    def bytes_available(self) -> int:
        """Return the number of physical bytes left in the buffer."""
        return len(self._data) - self._position

    def push_limit(self, end: int) -> None:
        """Restrict reads to offsets below end until pop_limit() is called.

        Args:
            end: Absolute offset of the frame end

        Raises:
            FrameOverrunError: If end lies beyond the enclosing frame
        """
        if self._limits and end > self._limits[-1]:
            raise FrameOverrunError(
                f"Nested frame ending at offset {end} exceeds enclosing frame "
                f"ending at offset {self._limits[-1]}"
            )
        self._limits.append(end)

    def pop_limit(self) -> int:
        """Remove the innermost frame limit and return it."""
        return self._limits.pop()

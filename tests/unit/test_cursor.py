"""Unit tests for byte cursors."""

from __future__ import annotations

import pytest

from attrframe.codec.cursor import ByteReader, ByteWriter
from attrframe.exceptions import FrameOverrunError, TruncatedInputError


class TestByteWriter:
    """Test ByteWriter functionality."""

    def test_write_byte_and_bytes(self) -> None:
        """Test writing single bytes and byte strings."""
        writer = ByteWriter()
        writer.write_byte(0x01)
        writer.write_bytes(b"\x02\x03")

        assert len(writer) == 3
        assert writer.to_bytes() == b"\x01\x02\x03"

    def test_write_byte_bounds(self) -> None:
        """Test byte range checking."""
        writer = ByteWriter()
        with pytest.raises(ValueError, match="0-255"):
            writer.write_byte(256)
        with pytest.raises(ValueError, match="0-255"):
            writer.write_byte(-1)
        assert len(writer) == 0

    def test_empty_writer(self) -> None:
        """Test empty writer."""
        assert ByteWriter().to_bytes() == b""


class TestByteReader:
    """Test ByteReader functionality."""

    def test_peek_does_not_consume(self) -> None:
        """Test that peeking leaves the position unchanged."""
        reader = ByteReader(b"\x07\x08")

        assert reader.peek_byte() == 7
        assert reader.peek_byte() == 7
        assert reader.position() == 0
        assert reader.read_byte() == 7
        assert reader.position() == 1

    def test_read_bytes(self) -> None:
        """Test reading byte runs."""
        reader = ByteReader(b"abcdef")

        assert reader.read_bytes(2) == b"ab"
        assert reader.read_bytes(0) == b""
        assert reader.read_bytes(4) == b"cdef"
        assert reader.bytes_available() == 0

    def test_read_past_end(self) -> None:
        """Test truncation is reported."""
        reader = ByteReader(b"\x01")
        reader.read_byte()

        with pytest.raises(TruncatedInputError):
            reader.read_byte()
        with pytest.raises(TruncatedInputError):
            reader.peek_byte()

    def test_truncated_read_leaves_position(self) -> None:
        """Test a failed read consumes nothing."""
        reader = ByteReader(b"\x01\x02")

        with pytest.raises(TruncatedInputError, match="need 3, have 2"):
            reader.read_bytes(3)
        assert reader.position() == 0

    def test_negative_read(self) -> None:
        """Test negative lengths are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            ByteReader(b"").read_bytes(-1)

    def test_frame_limit(self) -> None:
        """Test reads can't cross a pushed frame limit."""
        reader = ByteReader(b"\x01\x02\x03\x04")
        reader.push_limit(2)

        assert reader.read_bytes(2) == b"\x01\x02"
        with pytest.raises(FrameOverrunError):
            reader.peek_byte()
        with pytest.raises(FrameOverrunError):
            reader.read_byte()

        assert reader.pop_limit() == 2
        assert reader.read_byte() == 3

    def test_frame_limit_checked_before_truncation(self) -> None:
        """Test crossing a frame end is an overrun even when data is also short."""
        reader = ByteReader(b"\x01")
        reader.push_limit(1)

        with pytest.raises(FrameOverrunError):
            reader.read_bytes(5)

    def test_limit_beyond_data_reports_truncation(self) -> None:
        """Test reading inside a frame but past the data is a truncation."""
        reader = ByteReader(b"\x01")
        reader.push_limit(10)

        with pytest.raises(TruncatedInputError):
            reader.read_bytes(5)

    def test_nested_limit_must_fit(self) -> None:
        """Test a nested frame can't extend past its parent."""
        reader = ByteReader(bytes(10))
        reader.push_limit(5)
        reader.push_limit(3)
        reader.pop_limit()

        with pytest.raises(FrameOverrunError, match="exceeds enclosing frame"):
            reader.push_limit(6)

"""Unit tests for value codecs."""

from __future__ import annotations

import enum

import pytest

from attrframe.codec.cursor import ByteReader
from attrframe.codec.values import (
    BoolCodec,
    EnumCodec,
    FixedBytesCodec,
    TextCodec,
    UIntCodec,
    VarBytesCodec,
    VarUIntCodec,
)
from attrframe.exceptions import DecodeError, EncodeError, TruncatedInputError


class Color(enum.Enum):
    """Test enum."""

    RED = "r"
    GREEN = "g"
    BLUE = "b"


class TestBoolCodec:
    """Test bool encoding."""

    def test_values(self) -> None:
        """Test both values."""
        codec = BoolCodec()
        assert codec.writer(True).to_bytes() == b"\x01"
        assert codec.writer(False).to_bytes() == b"\x00"
        assert codec.read(ByteReader(b"\x01")) is True
        assert codec.read(ByteReader(b"\x00")) is False

    def test_invalid_byte(self) -> None:
        """Test bytes other than 0 and 1."""
        with pytest.raises(DecodeError, match="invalid bool byte 0x02"):
            BoolCodec().read(ByteReader(b"\x02"))

    def test_wrong_type(self) -> None:
        """Test non-bool values."""
        with pytest.raises(EncodeError, match="expected bool"):
            BoolCodec().writer(1)


class TestUIntCodec:
    """Test fixed-width integer encoding."""

    @pytest.mark.parametrize(
        "max_value,width",
        [(0, 1), (1, 1), (255, 1), (256, 2), (65535, 2), (65536, 3), (0xFFFFFFFF, 4)],
    )
    def test_width_for_range(self, max_value: int, width: int) -> None:
        """Test the smallest width is chosen."""
        assert UIntCodec.for_range(max_value).width == width

    def test_roundtrip_value(self) -> None:
        """Test a value written and read back."""
        codec = UIntCodec.for_range(1000)
        assert codec.writer(1000).to_bytes() == b"\x03\xe8"
        assert codec.read(ByteReader(b"\x03\xe8")) == 1000

    def test_bounds(self) -> None:
        """Test values above the maximum."""
        codec = UIntCodec.for_range(1000)
        with pytest.raises(EncodeError, match="out of bounds"):
            codec.writer(1001)
        with pytest.raises(DecodeError, match="exceeds max 1000"):
            codec.read(ByteReader(b"\x03\xe9"))

    def test_bool_rejected(self) -> None:
        """Test bools are not accepted as integers."""
        with pytest.raises(EncodeError, match="expected int"):
            UIntCodec(1).writer(True)

    def test_little_endian(self) -> None:
        """Test the byte order option."""
        codec = UIntCodec(2, "little")
        assert codec.writer(1).to_bytes() == b"\x01\x00"
        assert codec.read(ByteReader(b"\x01\x00")) == 1

    def test_invalid_width(self) -> None:
        """Test zero width."""
        with pytest.raises(ValueError, match="positive"):
            UIntCodec(0)


class TestVariableLengthCodecs:
    """Test varint, bytes and str encoding."""

    def test_varuint(self) -> None:
        """Test varint integers."""
        codec = VarUIntCodec()
        assert codec.writer(300).to_bytes() == b"\xac\x02"
        assert codec.read(ByteReader(b"\xac\x02")) == 300

    def test_fixed_bytes(self) -> None:
        """Test fixed-length bytes."""
        codec = FixedBytesCodec(3)
        assert codec.writer(b"abc").to_bytes() == b"abc"
        assert codec.read(ByteReader(b"abcd")) == b"abc"
        with pytest.raises(EncodeError, match="expected 3 bytes, got 2"):
            codec.writer(b"ab")

    def test_var_bytes(self) -> None:
        """Test length-prefixed bytes."""
        codec = VarBytesCodec()
        assert codec.writer(b"abc").to_bytes() == b"\x03abc"
        assert codec.writer(b"").to_bytes() == b"\x00"
        assert codec.read(ByteReader(b"\x03abc")) == b"abc"

    def test_var_bytes_truncated(self) -> None:
        """Test a length longer than the data."""
        with pytest.raises(TruncatedInputError):
            VarBytesCodec().read(ByteReader(b"\x05ab"))

    def test_text(self) -> None:
        """Test UTF-8 text is length-prefixed by its encoded size."""
        codec = TextCodec()
        assert codec.writer("héllo").to_bytes() == b"\x06h\xc3\xa9llo"
        assert codec.read(ByteReader(b"\x06h\xc3\xa9llo")) == "héllo"

    def test_text_invalid_utf8(self) -> None:
        """Test invalid UTF-8."""
        with pytest.raises(DecodeError, match="UTF-8"):
            TextCodec().read(ByteReader(b"\x01\xff"))


class TestEnumCodec:
    """Test enum encoding."""

    def test_ordinals(self) -> None:
        """Test enums are encoded by position."""
        codec = EnumCodec(Color)
        assert codec.writer(Color.RED).to_bytes() == b"\x00"
        assert codec.writer(Color.BLUE).to_bytes() == b"\x02"
        assert codec.read(ByteReader(b"\x01")) is Color.GREEN

    def test_invalid_ordinal(self) -> None:
        """Test ordinals past the last member."""
        with pytest.raises(DecodeError, match="invalid enum ordinal 3"):
            EnumCodec(Color).read(ByteReader(b"\x03"))

    def test_wrong_type(self) -> None:
        """Test values of another type."""
        with pytest.raises(EncodeError, match="expected Color"):
            EnumCodec(Color).writer("r")

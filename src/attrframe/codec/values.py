"""Value codecs for schema-declared attributes.

Each codec turns one Python value into a SizedWriter and reads it back from
a ByteReader. The schema layer picks a codec per field from its annotation
and Pydantic constraints.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Literal

from ..exceptions import DecodeError, EncodeError
from . import sized
from .cursor import ByteReader
from .sized import SizedWriter
from .varint import read_varint


class ValueCodec(ABC):
    """Encodes and decodes a single attribute value."""

    @abstractmethod
    def writer(self, value: Any) -> SizedWriter:
        """Return a sized writer for value.

        Raises:
            EncodeError: If value can't be encoded
        """

    @abstractmethod
    def read(self, reader: ByteReader) -> Any:
        """Read a value.

        Raises:
            DecodeError: If the bytes don't form a valid value
        """

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable description of the wire format."""


class BoolCodec(ValueCodec):
    """One byte: 0x00 for False, 0x01 for True."""

    def writer(self, value: Any) -> SizedWriter:
        if not isinstance(value, bool):
            raise EncodeError(f"expected bool, got {type(value).__name__}")
        return sized.byte(1 if value else 0)

    def read(self, reader: ByteReader) -> bool:
        byte = reader.read_byte()
        if byte > 1:
            raise DecodeError(f"invalid bool byte 0x{byte:02x}")
        return byte == 1

    def describe(self) -> str:
        return "bool (1 byte)"


class UIntCodec(ValueCodec):
    """Fixed-width unsigned integer."""

    def __init__(
        self,
        width: int,
        byte_order: Literal["big", "little"] = "big",
        max_value: int | None = None,
    ) -> None:
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        self.width = width
        self.byte_order = byte_order
        self.max_value = max_value if max_value is not None else (1 << (8 * width)) - 1

    @classmethod
    def for_range(cls, max_value: int) -> UIntCodec:
        """Smallest big-endian codec able to hold 0..max_value."""
        width = max(1, (max_value.bit_length() + 7) // 8)
        return cls(width, max_value=max_value)

    def writer(self, value: Any) -> SizedWriter:
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodeError(f"expected int, got {type(value).__name__}")
        if value < 0 or value > self.max_value:
            raise EncodeError(f"value {value} out of bounds [0, {self.max_value}]")
        return sized.uint(value, self.width, self.byte_order)

    def read(self, reader: ByteReader) -> int:
        value = int.from_bytes(reader.read_bytes(self.width), self.byte_order)
        if value > self.max_value:
            raise DecodeError(f"decoded value {value} exceeds max {self.max_value}")
        return value

    def describe(self) -> str:
        return f"uint ({self.width} byte{'s' if self.width != 1 else ''})"


class VarUIntCodec(ValueCodec):
    """Unsigned varint."""

    def writer(self, value: Any) -> SizedWriter:
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodeError(f"expected int, got {type(value).__name__}")
        return sized.varint(value)

    def read(self, reader: ByteReader) -> int:
        return read_varint(reader)

    def describe(self) -> str:
        return "varint"


class FixedBytesCodec(ValueCodec):
    """Exactly length raw bytes."""

    def __init__(self, length: int) -> None:
        self.length = length

    def writer(self, value: Any) -> SizedWriter:
        if not isinstance(value, bytes):
            raise EncodeError(f"expected bytes, got {type(value).__name__}")
        if len(value) != self.length:
            raise EncodeError(f"expected {self.length} bytes, got {len(value)} bytes")
        return sized.raw_bytes(value)

    def read(self, reader: ByteReader) -> bytes:
        return reader.read_bytes(self.length)

    def describe(self) -> str:
        return f"bytes ({self.length} bytes)"


class VarBytesCodec(ValueCodec):
    """Varint length followed by raw bytes."""

    def writer(self, value: Any) -> SizedWriter:
        if not isinstance(value, bytes):
            raise EncodeError(f"expected bytes, got {type(value).__name__}")
        return sized.concat(sized.varint(len(value)), sized.raw_bytes(value))

    def read(self, reader: ByteReader) -> bytes:
        return reader.read_bytes(read_varint(reader))

    def describe(self) -> str:
        return "bytes (varint length)"


class TextCodec(ValueCodec):
    """Varint length followed by UTF-8 text."""

    def writer(self, value: Any) -> SizedWriter:
        if not isinstance(value, str):
            raise EncodeError(f"expected str, got {type(value).__name__}")
        data = value.encode("utf-8")
        return sized.concat(sized.varint(len(data)), sized.raw_bytes(data))

    def read(self, reader: ByteReader) -> str:
        data = reader.read_bytes(read_varint(reader))
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"invalid UTF-8 encoding: {e}") from e

    def describe(self) -> str:
        return "str (varint length, UTF-8)"


class EnumCodec(ValueCodec):
    """One-byte ordinal (0-indexed position in the enum)."""

    def __init__(self, enum_type: type[enum.Enum]) -> None:
        self.enum_type = enum_type
        self.members = list(enum_type)
        if not self.members:
            raise ValueError(f"Enum {enum_type.__name__} has no values")
        if len(self.members) > 256:
            raise ValueError(f"Enum {enum_type.__name__} has more than 256 values")

    def writer(self, value: Any) -> SizedWriter:
        if not isinstance(value, self.enum_type):
            raise EncodeError(
                f"expected {self.enum_type.__name__}, got {type(value).__name__}"
            )
        return sized.byte(self.members.index(value))

    def read(self, reader: ByteReader) -> enum.Enum:
        ordinal = reader.read_byte()
        if ordinal >= len(self.members):
            raise DecodeError(
                f"invalid enum ordinal {ordinal} (only {len(self.members)} values)"
            )
        return self.members[ordinal]

    def describe(self) -> str:
        return f"enum {self.enum_type.__name__} (1 byte)"

"""Unsigned variable-length integers (LEB128).

Each byte carries 7 bits of the value, least significant group first. The
high bit of a byte is set when another byte follows. Only the canonical
(shortest) form is accepted when reading, so decoding and re-encoding always
reproduce the same bytes.
"""

from __future__ import annotations

from ..config import VARINT_MAX
from ..exceptions import DecodeError
from .cursor import ByteReader

#: Longest encoding of a 64-bit value.
VARINT_MAX_BYTES = 10


def varint_size(value: int) -> int:
    """Return the number of bytes encode_varint() produces for value.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(f"varint requires non-negative value, got {value}")
    size = 1
    while value > 0x7F:
        value >>= 7
        size += 1
    return size


def encode_varint(value: int) -> bytes:
    """Encode a non-negative integer as an unsigned varint.

    Args:
        value: Integer to encode (0 to 2**64 - 1)

    Returns:
        Encoded bytes

    Raises:
        ValueError: If value is negative or larger than 64 bits

    Example:
        >>> encode_varint(300)
        b'\\xac\\x02'
    """
    if value < 0:
        raise ValueError(f"varint requires non-negative value, got {value}")
    if value > VARINT_MAX:
        raise ValueError(f"varint value {value} exceeds 64 bits")

    result = bytearray()
    while True:
        group = value & 0x7F
        value >>= 7
        if value:
            result.append(group | 0x80)
        else:
            result.append(group)
            return bytes(result)


def read_varint(reader: ByteReader, error: type[DecodeError] = DecodeError) -> int:
    """Read an unsigned varint from the reader.

    Args:
        reader: Reader positioned at the first varint byte
        error: Exception class raised for malformed encodings

    Returns:
        Decoded integer

    Raises:
        error: If the encoding is longer than 10 bytes, exceeds 64 bits,
            or is not in canonical form
        TruncatedInputError: If the input ends inside the varint
    """
    value = 0
    for index in range(VARINT_MAX_BYTES):
        byte = reader.read_byte()
        value |= (byte & 0x7F) << (7 * index)

        if not byte & 0x80:
            if byte == 0 and index > 0:
                raise error(f"Non-canonical varint: redundant trailing zero byte at {index}")
            if value > VARINT_MAX:
                raise error(f"varint value {value} exceeds 64 bits")
            return value

    raise error(f"varint longer than {VARINT_MAX_BYTES} bytes")

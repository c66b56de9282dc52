"""Codec configuration.

The width and byte order of the frame length prefix are a policy of the
embedding protocol. They are held constant across a given use, so they live
in a small configuration dataclass that is passed to the framing, encoding
and decoding functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

LengthPrefix = Literal["varint", "u8", "u16", "u32", "u64"]
ByteOrder = Literal["big", "little"]

#: Width in bytes of each fixed-width length prefix format.
FIXED_PREFIX_WIDTHS = {"u8": 1, "u16": 2, "u32": 4, "u64": 8}

#: Largest value an unsigned varint length prefix may carry.
VARINT_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for attribute framing.

    Attributes:
        length_prefix: Encoding of the frame length prefix (default "varint").
            - "varint": unsigned LEB128, 1-10 bytes, canonical form only
            - "u8", "u16", "u32", "u64": fixed-width unsigned integer

        byte_order: Byte order of fixed-width length prefixes ("big" by default).
            Ignored by varints.

        max_frame_length: Default upper bound on declared frame lengths when
            decoding (None = unrestricted). A frame_limit passed to a decode
            call takes precedence.

    Examples:
        ```python
        from attrframe import CodecConfig

        # Default: varint length prefix, no limit
        config = CodecConfig()

        # 2-byte little-endian prefix, frames of at most 512 bytes
        config = CodecConfig(length_prefix="u16", byte_order="little", max_frame_length=512)
        ```
    """

    length_prefix: LengthPrefix = "varint"
    byte_order: ByteOrder = "big"
    max_frame_length: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.length_prefix != "varint" and self.length_prefix not in FIXED_PREFIX_WIDTHS:
            raise ValueError(
                f"length_prefix must be 'varint', 'u8', 'u16', 'u32' or 'u64', "
                f"got {self.length_prefix!r}"
            )

        if self.byte_order not in ("big", "little"):
            raise ValueError(f"byte_order must be 'big' or 'little', got {self.byte_order!r}")

        if self.max_frame_length is not None and self.max_frame_length < 0:
            raise ValueError(
                f"max_frame_length must be non-negative, got {self.max_frame_length}"
            )

    def max_length(self) -> int:
        """Return the largest payload length the length prefix can represent."""
        if self.length_prefix == "varint":
            return VARINT_MAX
        return (1 << (8 * FIXED_PREFIX_WIDTHS[self.length_prefix])) - 1


DEFAULT_CONFIG = CodecConfig()

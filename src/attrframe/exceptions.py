"""Exception hierarchy for attrframe.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from AttrFrameError for easy catching of any attrframe-specific error.
"""

from __future__ import annotations


class AttrFrameError(Exception):
    """Base exception for all attrframe errors."""

    pass


class SchemaError(AttrFrameError):
    """Raised when an attribute schema is invalid.

    Examples:
        - Two fields declare the same attribute key
        - Attribute key outside 0-255
        - Unsupported field type
        - Field without an attribute key
    """

    pass


class EncodeError(AttrFrameError):
    """Raised when encoding attributes fails.

    Examples:
        - Field key outside 0-255
        - Value out of bounds for its value codec
        - Sized writer emitted a different number of bytes than it reported
    """

    pass


class FrameLengthOverflowError(EncodeError):
    """Raised when a payload is too long for the configured length prefix."""

    pass


class DecodeError(AttrFrameError):
    """Raised when decoding binary data fails.

    Examples:
        - Invalid field value
        - Trailing bytes after a frame
        - A field continuation failed
    """

    pass


class FramingError(DecodeError):
    """Raised when a frame is inconsistent with its length prefix.

    Examples:
        - Inner decoder left bytes of the frame unconsumed
        - Trailing data after a whole-buffer frame
    """

    pass


class MalformedLengthError(FramingError):
    """Raised when the length prefix itself cannot be parsed."""

    pass


class FrameTooLargeError(FramingError):
    """Raised when a declared frame length exceeds the caller's limit.

    Always raised before any field byte is read.
    """

    pass


class FrameOverrunError(FramingError):
    """Raised when decoding consumes more bytes than the frame declared."""

    pass


class TruncatedInputError(FramingError):
    """Raised when the input ends before the declared frame does."""

    pass

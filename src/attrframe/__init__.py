"""attrframe: Extensible Attribute Frames

A Python library for length-framed binary attribute containers: sequences of
1-byte-keyed fields where keys a decoder doesn't understand are kept verbatim
instead of rejected. Old decoders can consume data from newer encoders, and
re-encoding reproduces the original bytes exactly.

Key Features:
- Schema-agnostic core: key handling and field emission are caller policies
- Greedy, order-sensitive decoding with a verbatim remainder
- Deterministic encoding with fields sorted by key
- Pydantic-based attribute schemas

Quick Start:
    >>> from typing import Optional
    >>> from attrframe import AttributeModel, AttributeSchema, AttrField, BoundedAttr
    >>>
    >>> class AddressAttributes(AttributeModel):
    ...     derivation_path: Optional[bytes] = AttrField(key=1)
    ...     network_magic: Optional[int] = BoundedAttr(key=2, le=0xFFFFFFFF)
    >>>
    >>> schema = AttributeSchema.from_model(AddressAttributes)
    >>> data = schema.encode(schema.mk_attributes(network_magic=42))
    >>> schema.decode(data).head.network_magic
    42
"""

from __future__ import annotations

from .codec import (
    Attributes,
    AttributeSchema,
    ByteReader,
    ByteWriter,
    FieldSchema,
    KeyTable,
    SizedWriter,
    are_attributes_known,
    decode,
    encode,
    get_attributes,
    mk_attributes,
    no_fields,
    no_known_keys,
    put_attributes,
    size_attributes,
    write_attributes,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    AttrFrameError,
    DecodeError,
    EncodeError,
    FrameLengthOverflowError,
    FrameOverrunError,
    FrameTooLargeError,
    FramingError,
    MalformedLengthError,
    SchemaError,
    TruncatedInputError,
)
from .framing import frame_payload, get_with_length, put_with_length, unframe_payload
from .logger import configure_logging
from .models import AttrField, AttributeModel, BoundedAttr, FixedBytesAttr
from .utils import encoded_size, field_sizes, payload_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Attributes",
    "mk_attributes",
    "are_attributes_known",
    "encode",
    "decode",
    "get_attributes",
    "put_attributes",
    "write_attributes",
    "size_attributes",
    # Policies
    "KeyTable",
    "no_known_keys",
    "no_fields",
    # Primitives
    "ByteReader",
    "ByteWriter",
    "SizedWriter",
    # Schemas
    "AttributeModel",
    "AttributeSchema",
    "FieldSchema",
    "AttrField",
    "BoundedAttr",
    "FixedBytesAttr",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    "configure_logging",
    # Exceptions
    "AttrFrameError",
    "SchemaError",
    "EncodeError",
    "FrameLengthOverflowError",
    "DecodeError",
    "FramingError",
    "MalformedLengthError",
    "FrameTooLargeError",
    "FrameOverrunError",
    "TruncatedInputError",
    # Framing
    "frame_payload",
    "unframe_payload",
    "get_with_length",
    "put_with_length",
    # Sizing
    "encoded_size",
    "payload_size",
    "field_sizes",
    # Version
    "__version__",
]

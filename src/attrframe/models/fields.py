"""Field helpers for attribute schemas.

This module provides convenience functions for declaring attribute fields
with a 1-byte key and the constraints that select their value codec.
"""

from __future__ import annotations

from typing import Any, Optional, cast

from pydantic import Field
from pydantic.fields import FieldInfo

#: json_schema_extra entry holding a field's attribute key.
ATTR_KEY = "attr_key"


def AttrField(*, key: int, **kwargs: Any) -> FieldInfo:
    """Create an attribute field tagged with a 1-byte key.

    The field defaults to None (attribute absent).

    Args:
        key: Attribute key (0-255)
        **kwargs: Additional Field() arguments (ge, le, min_length, description, ...)

    Returns:
        Pydantic FieldInfo suitable for use as a field default.

    Example:
        >>> class Attrs(AttributeModel):
        ...     label: Optional[str] = AttrField(key=0)
    """
    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[ATTR_KEY] = key
    kwargs.setdefault("default", None)
    return cast(FieldInfo, Field(json_schema_extra=extra, **kwargs))


def BoundedAttr(*, key: int, ge: int = 0, le: Optional[int] = None, **kwargs: Any) -> FieldInfo:
    """Create an unsigned integer attribute.

    With le= set the value is encoded at the smallest fixed width holding le;
    without it the value is encoded as a varint.

    Args:
        key: Attribute key (0-255)
        ge: Minimum value (must be >= 0)
        le: Maximum value (inclusive, optional)
        **kwargs: Additional Field() arguments

    Example:
        >>> class Attrs(AttributeModel):
        ...     magic: Optional[int] = BoundedAttr(key=2, le=0xFFFFFFFF)
    """
    return AttrField(key=key, ge=ge, le=le, **kwargs)


def FixedBytesAttr(*, key: int, length: int, **kwargs: Any) -> FieldInfo:
    """Create a fixed-length bytes attribute.

    Args:
        key: Attribute key (0-255)
        length: Exact length in bytes
        **kwargs: Additional Field() arguments

    Example:
        >>> class Attrs(AttributeModel):
        ...     digest: Optional[bytes] = FixedBytesAttr(key=3, length=32)
    """
    return AttrField(key=key, min_length=length, max_length=length, **kwargs)

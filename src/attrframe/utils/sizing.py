"""Attribute size calculation utilities.

This module provides functions to calculate the encoded size of attributes
declared with an AttributeModel schema without actually encoding them.
"""

from __future__ import annotations

from typing import Any

from ..codec.attributes import Attributes
from ..codec.schema import AttributeSchema
from ..config import DEFAULT_CONFIG, CodecConfig
from ..models.base import AttributeModel


def _schema_for(schema_or_model: AttributeSchema[Any] | type[AttributeModel]) -> AttributeSchema[Any]:
    if isinstance(schema_or_model, AttributeSchema):
        return schema_or_model
    return AttributeSchema.from_model(schema_or_model)


def encoded_size(
    schema_or_model: AttributeSchema[Any] | type[AttributeModel],
    attrs: Attributes[Any],
    config: CodecConfig = DEFAULT_CONFIG,
) -> int:
    """Calculate the encoded frame size of attributes in bytes.

    The size includes the length prefix, every present field with its key
    byte, and the remainder.

    Args:
        schema_or_model: AttributeSchema or AttributeModel class
        attrs: Attributes to measure
        config: Codec configuration (prefix format)

    Returns:
        Size in bytes

    Raises:
        SchemaError: If the model is not a valid attribute schema
        EncodeError: If a field value can't be encoded

    Example:
        >>> class Attrs(AttributeModel):
        ...     flag: Optional[bool] = AttrField(key=0)
        >>> encoded_size(Attrs, mk_attributes(Attrs(flag=True)))
        3  # 1 prefix byte + 1 key byte + 1 value byte
    """
    return _schema_for(schema_or_model).size(attrs, config)


def payload_size(
    schema_or_model: AttributeSchema[Any] | type[AttributeModel],
    attrs: Attributes[Any],
) -> int:
    """Calculate the payload size of attributes (frame minus length prefix).

    Example:
        >>> payload_size(Attrs, mk_attributes(Attrs(flag=True)))
        2
    """
    return sum(field_sizes(schema_or_model, attrs).values()) + len(attrs.remainder)


def field_sizes(
    schema_or_model: AttributeSchema[Any] | type[AttributeModel],
    attrs: Attributes[Any],
) -> dict[str, int]:
    """Get the encoded size in bytes of each present field, key byte included.

    Args:
        schema_or_model: AttributeSchema or AttributeModel class
        attrs: Attributes to analyze

    Returns:
        Dictionary mapping field names to their size in bytes, in key order

    Example:
        >>> field_sizes(Attrs, mk_attributes(Attrs(flag=True)))
        {'flag': 2}
    """
    schema = _schema_for(schema_or_model)
    sizes: dict[str, int] = {}
    for field in schema.fields:
        value = getattr(attrs.head, field.name)
        if value is not None:
            sizes[field.name] = 1 + field.writer(value).size()
    return sizes

"""Base model for schema-declared attributes.

This module provides the AttributeModel class that attribute schemas should
inherit from. Each field is an optional attribute tagged with a 1-byte key;
None means the attribute is absent from the frame.
"""

from __future__ import annotations

import enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class AttributeModel(BaseModel):
    """Base class for all attribute schemas.

    Fields should be declared with AttrField() (or one of its wrappers) and
    default to None. Models are frozen so they can serve as the hashable,
    immutable head of an Attributes container.

    attrframe-specific options can be configured as ClassVar attributes:

    Example:
        >>> from typing import ClassVar, Optional
        >>> class AddressAttributes(AttributeModel):
        ...     derivation_path: Optional[bytes] = AttrField(key=1)
        ...     network_magic: Optional[int] = BoundedAttr(key=2, ge=0, le=0xFFFFFFFF)
        ...
        ...     attr_max_frame_length: ClassVar[Optional[int]] = 256

    Attributes:
        attr_max_frame_length: Default frame limit when decoding (optional)
    """

    model_config = ConfigDict(
        # Heads are immutable and hashable
        frozen=True,
        # Forbid fields not declared in the schema
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    attr_max_frame_length: ClassVar[int | None] = None

    def __str__(self) -> str:
        present = ", ".join(
            f"{name}: {value!r}"
            for name, value in ((name, getattr(self, name)) for name in type(self).model_fields)
            if value is not None
        )
        return f"{type(self).__name__} {{ {present} }}" if present else f"{type(self).__name__} {{ }}"

    def _order_key(self) -> tuple[Any, ...]:
        key: list[Any] = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, enum.Enum):
                value = list(type(value)).index(value)
            # Absent attributes sort before present ones
            key.append((0, 0) if value is None else (1, value))
        return tuple(key)

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._order_key() <= other._order_key()

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._order_key() > other._order_key()

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._order_key() >= other._order_key()

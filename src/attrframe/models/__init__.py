"""Pydantic attribute modeling for attrframe.

This module provides the AttributeModel class and field helpers for declaring
attribute schemas with Pydantic.
"""

from __future__ import annotations

from .base import AttributeModel
from .fields import ATTR_KEY, AttrField, BoundedAttr, FixedBytesAttr

__all__ = [
    "AttributeModel",
    "AttrField",
    "BoundedAttr",
    "FixedBytesAttr",
    "ATTR_KEY",
]

"""Schema introspection for attribute models.

This module analyzes an AttributeModel subclass and derives the key handler
and field policy the attribute codec needs: which key maps to which field,
and which value codec reads and writes it.
"""

from __future__ import annotations

import enum
import types
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin

from pydantic import ValidationError
from pydantic.fields import FieldInfo

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DecodeError, FramingError, SchemaError
from ..models.base import AttributeModel
from ..models.fields import ATTR_KEY
from .attributes import Attributes
from .cursor import ByteReader, ByteWriter
from .decoder import decode as _decode
from .decoder import get_attributes
from .dispatch import Continuation, KeyTable
from .encoder import encode as _encode
from .encoder import size_attributes, write_attributes
from .sized import SizedWriter
from .values import (
    BoolCodec,
    EnumCodec,
    FixedBytesCodec,
    TextCodec,
    UIntCodec,
    ValueCodec,
    VarBytesCodec,
    VarUIntCodec,
)

M = TypeVar("M", bound=AttributeModel)

_UNION_TYPES: tuple[Any, ...] = (Union,)
if hasattr(types, "UnionType"):
    _UNION_TYPES += (types.UnionType,)


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single attribute field.

    Attributes:
        name: Field name
        key: Attribute key (0-255)
        python_type: Python type of the value (Optional stripped)
        codec: Value codec reading and writing the field
    """

    name: str
    key: int
    python_type: Type[Any]
    codec: ValueCodec

    def writer(self, value: Any) -> SizedWriter:
        """Return a sized writer for the field value.

        Raises:
            EncodeError: If value can't be encoded
        """
        return self.codec.writer(value)


class AttributeSchema(Generic[M]):
    """Schema information for an entire attribute model.

    This class introspects an AttributeModel and provides the key handler,
    field policy and encode/decode entry points for it.

    Example:
        >>> schema = AttributeSchema.from_model(AddressAttributes)
        >>> data = schema.encode(schema.mk_attributes(network_magic=764824073))
        >>> schema.decode(data).head.network_magic
        764824073
    """

    def __init__(self, model_class: Type[M]) -> None:
        """Initialize schema from an AttributeModel subclass.

        Args:
            model_class: Model class to introspect

        Raises:
            SchemaError: If the model can't be encoded as attributes
        """
        if not (isinstance(model_class, type) and issubclass(model_class, AttributeModel)):
            raise SchemaError(f"{model_class!r} is not an AttributeModel subclass")

        self.model_class = model_class
        self.fields: List[FieldSchema] = []
        self._introspect()
        self.key_handler = KeyTable({field.key: self._field_reader(field) for field in self.fields})

    @classmethod
    def from_model(cls, model_class: Type[M]) -> AttributeSchema[M]:
        """Create a schema from an AttributeModel subclass.

        Args:
            model_class: Model class

        Returns:
            AttributeSchema instance
        """
        return cls(model_class)

    def _introspect(self) -> None:
        """Introspect the model and populate field schemas, ordered by key."""
        seen: dict[int, str] = {}
        for field_name, field_info in self.model_class.model_fields.items():
            field_schema = self._extract_field_schema(field_name, field_info)
            if field_schema.key in seen:
                raise SchemaError(
                    f"Fields {seen[field_schema.key]} and {field_name} both use "
                    f"attribute key {field_schema.key}"
                )
            seen[field_schema.key] = field_name
            self.fields.append(field_schema)
        self.fields.sort(key=lambda field: field.key)

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        """Extract schema information from a Pydantic FieldInfo.

        Args:
            name: Field name
            field_info: Pydantic FieldInfo object

        Returns:
            FieldSchema with extracted information
        """
        extra = field_info.json_schema_extra
        key = extra.get(ATTR_KEY) if isinstance(extra, dict) else None
        if key is None:
            raise SchemaError(f"Field {name} has no attribute key; declare it with AttrField()")
        if not isinstance(key, int) or not 0 <= key <= 0xFF:
            raise SchemaError(f"Field {name}: attribute key must be 0-255, got {key!r}")

        if field_info.is_required() or field_info.default is not None:
            raise SchemaError(f"Field {name}: attribute fields must default to None")

        annotation = field_info.annotation
        if annotation is None:
            raise SchemaError(f"Field {name} has no type annotation")

        # Strip Optional (Union[T, None])
        if get_origin(annotation) in _UNION_TYPES:
            non_none_args = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(non_none_args) != 1:
                raise SchemaError(f"Field {name}: complex Union types not supported")
            annotation = non_none_args[0]

        # Pydantic v2 stores constraints in metadata
        min_value = max_value = min_length = max_length = None
        for constraint in field_info.metadata:
            if getattr(constraint, "ge", None) is not None:
                min_value = constraint.ge
            if getattr(constraint, "le", None) is not None:
                max_value = constraint.le
            if getattr(constraint, "min_length", None) is not None:
                min_length = constraint.min_length
            if getattr(constraint, "max_length", None) is not None:
                max_length = constraint.max_length

        codec = self._select_codec(name, annotation, min_value, max_value, min_length, max_length)
        return FieldSchema(name=name, key=key, python_type=annotation, codec=codec)

    @staticmethod
    def _select_codec(
        name: str,
        annotation: Any,
        min_value: Optional[int],
        max_value: Optional[int],
        min_length: Optional[int],
        max_length: Optional[int],
    ) -> ValueCodec:
        """Pick the value codec for a field type and its constraints."""
        if annotation is bool:
            return BoolCodec()

        if isinstance(annotation, type) and issubclass(annotation, enum.Enum):
            try:
                return EnumCodec(annotation)
            except ValueError as e:
                raise SchemaError(f"Field {name}: {e}") from e

        if annotation is int:
            if min_value is None or min_value < 0:
                raise SchemaError(
                    f"Field {name}: integer attributes are unsigned and require ge= >= 0"
                )
            if max_value is None:
                return VarUIntCodec()
            if max_value < min_value:
                raise SchemaError(f"Field {name}: invalid bounds ge={min_value} > le={max_value}")
            return UIntCodec.for_range(int(max_value))

        if annotation is bytes:
            if max_length is not None and min_length == max_length:
                return FixedBytesCodec(max_length)
            return VarBytesCodec()

        if annotation is str:
            return TextCodec()

        raise SchemaError(
            f"Field {name}: unsupported type {annotation}. "
            f"Supported: bool, unsigned int, enum, bytes, str."
        )

    def _field_reader(self, field: FieldSchema) -> Any:
        """Build the KeyTable entry decoding one field into the head."""

        def field_reader(head: M) -> Continuation[M]:
            def read(reader: ByteReader) -> M:
                try:
                    value = field.codec.read(reader)
                except FramingError:
                    raise
                except DecodeError as e:
                    raise DecodeError(f"Error decoding field {field.name}: {e}") from e
                try:
                    return type(head).model_validate({**head.model_dump(), field.name: value})
                except ValidationError as e:
                    raise DecodeError(
                        f"Error decoding field {field.name}: {value!r} violates model "
                        f"constraints ({e.errors()[0]['msg']})"
                    ) from e

            return read

        return field_reader

    def field_policy(self, head: M) -> List[Tuple[int, SizedWriter]]:
        """Return (key, writer) pairs for every present field of head."""
        return [
            (field.key, field.writer(value))
            for field in self.fields
            if (value := getattr(head, field.name)) is not None
        ]

    def default_head(self) -> M:
        """Return a head with every attribute absent."""
        return self.model_class()

    def mk_attributes(self, **values: Any) -> Attributes[M]:
        """Build attributes with an empty remainder from field values."""
        return Attributes(self.model_class(**values), b"")

    def encode(self, attrs: Attributes[M], config: CodecConfig = DEFAULT_CONFIG) -> bytes:
        """Encode attributes to a framed byte string."""
        return _encode(self.field_policy, attrs, config)

    def write(
        self, writer: ByteWriter, attrs: Attributes[M], config: CodecConfig = DEFAULT_CONFIG
    ) -> None:
        """Write attributes into writer."""
        write_attributes(writer, self.field_policy, attrs, config)

    def size(self, attrs: Attributes[M], config: CodecConfig = DEFAULT_CONFIG) -> int:
        """Return the encoded frame size without encoding."""
        return size_attributes(self.field_policy, attrs, config)

    def _frame_limit(self, frame_limit: Optional[int]) -> Optional[int]:
        if frame_limit is not None:
            return frame_limit
        return self.model_class.attr_max_frame_length

    def decode(
        self,
        data: bytes,
        *,
        frame_limit: Optional[int] = None,
        config: CodecConfig = DEFAULT_CONFIG,
    ) -> Attributes[M]:
        """Decode a buffer holding exactly one frame of this schema."""
        return _decode(
            data,
            self.key_handler,
            self.default_head(),
            frame_limit=self._frame_limit(frame_limit),
            config=config,
        )

    def read(
        self,
        reader: ByteReader,
        *,
        frame_limit: Optional[int] = None,
        config: CodecConfig = DEFAULT_CONFIG,
    ) -> Attributes[M]:
        """Read one frame of this schema from reader."""
        return get_attributes(
            reader, self.key_handler, self._frame_limit(frame_limit), self.default_head(), config
        )

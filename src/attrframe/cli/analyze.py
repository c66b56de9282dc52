"""Schema analysis and frame dump CLI commands."""

from __future__ import annotations

import importlib.util
import inspect
import sys
from pathlib import Path
from typing import Optional

from ..codec.decoder import decode
from ..codec.dispatch import no_known_keys
from ..codec.schema import AttributeSchema
from ..config import CodecConfig
from ..framing.bounded import length_prefix_size
from ..models.base import AttributeModel


def analyze_file(file_path: Path) -> None:
    """Analyze all AttributeModel classes in a Python file.

    Args:
        file_path: Path to Python file containing attribute schemas
    """
    # Load the Python module
    spec = importlib.util.spec_from_file_location("user_module", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["user_module"] = module
    spec.loader.exec_module(module)

    # Find all AttributeModel subclasses defined in this file (not imported)
    model_classes = [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if obj is not AttributeModel
        and issubclass(obj, AttributeModel)
        and obj.__module__ == "user_module"
    ]

    if not model_classes:
        print(f"No AttributeModel classes found in {file_path}")
        return

    print(f"{len(model_classes)} schema{'s' if len(model_classes) != 1 else ''} loaded.")
    print()

    for model_class in model_classes:
        analyze_model_class(model_class)


def analyze_model_class(model_class: type[AttributeModel]) -> None:
    """Print the key layout of a single attribute schema.

    Args:
        model_class: Model class to analyze
    """
    schema = AttributeSchema.from_model(model_class)

    print(f"= {model_class.__name__} =")
    limit = model_class.attr_max_frame_length
    if limit is not None:
        print(f"  Frame limit: {limit} bytes")

    for field in schema.fields:
        print(f"  [{field.key:3d}] {field.name:<24} {field.codec.describe()}")
    print()


def dump_frame(data: bytes, config: CodecConfig, max_length: Optional[int] = None) -> None:
    """Decode a frame without recognizing any key and print its layout.

    Args:
        data: Framed bytes
        config: Codec configuration (prefix format)
        max_length: Maximum accepted frame length
    """
    attrs = decode(data, no_known_keys, None, frame_limit=max_length, config=config)
    payload = attrs.remainder

    print(f"Length prefix: {config.length_prefix} ({length_prefix_size(len(payload), config)} bytes)")
    print(f"Payload: {len(payload)} bytes")
    if payload:
        print(f"First key: {payload[0]}")
        print(f"Bytes: {payload.hex(' ')}")
    else:
        print(attrs)

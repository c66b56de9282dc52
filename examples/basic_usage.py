#!/usr/bin/env python3
"""Basic usage example for attrframe.

This example demonstrates:
1. Declaring an attribute schema with Pydantic
2. Encoding and decoding attribute frames
3. Inspecting frame and field sizes
"""

from __future__ import annotations

from typing import Optional

from attrframe import (
    AttrField,
    AttributeModel,
    AttributeSchema,
    BoundedAttr,
    are_attributes_known,
    encoded_size,
    field_sizes,
)


class AddressAttributes(AttributeModel):
    """Attributes attached to a wallet address."""

    derivation_path: Optional[bytes] = AttrField(key=1)
    network_magic: Optional[int] = BoundedAttr(key=2, le=0xFFFFFFFF)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("attrframe Basic Usage Example")
    print("=" * 60)
    print()

    schema = AttributeSchema.from_model(AddressAttributes)
    attrs = schema.mk_attributes(derivation_path=b"\x8a\x01\x2c", network_magic=764824073)

    print("1. Attributes:")
    print(f"   {attrs}")
    print()

    print("2. Size analysis:")
    for field_name, size in field_sizes(schema, attrs).items():
        print(f"   {field_name}: {size} bytes (key included)")
    print(f"   Frame: {encoded_size(schema, attrs)} bytes")
    print()

    print("3. Encoding...")
    data = schema.encode(attrs)
    print(f"   Hex: {data.hex(' ')}")
    print()

    print("4. Decoding...")
    decoded = schema.decode(data)
    print(f"   {decoded}")
    print(f"   All attributes known: {are_attributes_known(decoded)}")
    print()

    print("5. Verifying round-trip...")
    if decoded == attrs:
        print("   ✓ Round-trip successful! Attributes match.")
    else:
        print("   ✗ Round-trip failed! Attributes don't match.")
    print()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Forward compatibility example for attrframe.

This example demonstrates:
1. A newer schema adding attributes under higher keys
2. An older decoder keeping the unknown attributes as remainder
3. The older side re-encoding the frame byte for byte
"""

from __future__ import annotations

from typing import Optional

from attrframe import AttrField, AttributeModel, AttributeSchema, BoundedAttr, are_attributes_known


class AddressAttributesV1(AttributeModel):
    """Attributes known to the deployed release."""

    derivation_path: Optional[bytes] = AttrField(key=1)
    network_magic: Optional[int] = BoundedAttr(key=2, le=0xFFFFFFFF)


class AddressAttributesV2(AttributeModel):
    """Attributes of the upcoming release."""

    derivation_path: Optional[bytes] = AttrField(key=1)
    network_magic: Optional[int] = BoundedAttr(key=2, le=0xFFFFFFFF)
    memo: Optional[str] = AttrField(key=7)


def main() -> None:
    """Run the forward compatibility example."""
    print("=" * 60)
    print("attrframe Forward Compatibility Example")
    print("=" * 60)
    print()

    v1 = AttributeSchema.from_model(AddressAttributesV1)
    v2 = AttributeSchema.from_model(AddressAttributesV2)

    data = v2.encode(v2.mk_attributes(network_magic=42, memo="cold storage"))
    print(f"V2 frame:  {data.hex(' ')}")

    old = v1.decode(data)
    print(f"V1 sees:   {old}")
    print(f"V1 knows everything: {are_attributes_known(old)}")

    relayed = v1.encode(old)
    print(f"V1 relays: {relayed.hex(' ')}")
    print(f"Identical: {relayed == data}")
    print(f"V2 reads memo back: {v2.decode(relayed).head.memo!r}")


if __name__ == "__main__":
    main()

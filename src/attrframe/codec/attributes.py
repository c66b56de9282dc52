"""Attribute containers.

An Attributes value holds the fields a decoder recognized (the head, in
whatever structure the schema chooses) and the raw bytes of every field it
did not recognize (the remainder). Keeping the remainder verbatim lets old
decoders pass newer data through without loss.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

H = TypeVar("H")

NO_ATTRIBUTES = "<no attributes>"


@dataclass(frozen=True, order=True)
class Attributes(Generic[H]):
    """Immutable container of known attributes plus unparsed remainder.

    Equality, hashing and ordering are derived from (head, remainder).
    Ordering requires an orderable head; hashing requires a hashable one.

    Attributes:
        head: Data for all recognized keys (or a default when freshly built)
        remainder: Bytes of all unrecognized fields, in original order
    """

    head: H
    remainder: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.remainder, bytes):
            object.__setattr__(self, "remainder", bytes(self.remainder))

    def __repr__(self) -> str:
        remain = f", remain: <{len(self.remainder)} bytes>" if self.remainder else ""
        return f"Attributes {{ data: {self.head!r}{remain} }}"

    def __str__(self) -> str:
        if not self.remainder:
            return NO_ATTRIBUTES if self.head is None else str(self.head)
        data = "()" if self.head is None else str(self.head)
        return f"Attributes {{ data: {data}, remain: <{len(self.remainder)} bytes> }}"


def mk_attributes(head: H) -> Attributes[H]:
    """Build attributes from a head, with an empty remainder.

    Example:
        >>> mk_attributes(None)
        Attributes { data: None }
    """
    return Attributes(head, b"")


def are_attributes_known(attrs: Attributes[H]) -> bool:
    """Check whether every field was parsed into the head.

    Returns:
        True iff the remainder is empty
    """
    return not attrs.remainder

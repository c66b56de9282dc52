"""Key dispatch policies.

A key handler maps a peeked attribute key and the head accumulated so far to
a continuation that decodes the field, or None when the key is not
recognized. A field policy maps a head to the (key, writer) pairs to emit.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Callable, Optional, Tuple, TypeVar

from .cursor import ByteReader
from .sized import SizedWriter

H = TypeVar("H")

#: Decodes one field value (the key byte is already consumed) and returns the new head.
Continuation = Callable[[ByteReader], H]

#: (key, head) -> continuation, or None for an unrecognized key.
KeyHandler = Callable[[int, H], Optional[Continuation[H]]]

#: head -> (key, writer) pairs, in any order.
FieldPolicy = Callable[[H], Iterable[Tuple[int, SizedWriter]]]

#: head -> continuation for one key.
FieldReader = Callable[[H], Continuation[H]]


class KeyTable:
    """Dict-backed key handler.

    Each entry maps a key to a function that, given the current head, returns
    the continuation decoding that key's value.

    Example:
        >>> def read_flag(head):
        ...     return lambda reader: {**head, "flag": reader.read_byte() == 1}
        >>> table = KeyTable({0: read_flag})
        >>> table(0, {}) is not None
        True
        >>> table(1, {}) is None
        True
    """

    def __init__(self, readers: Mapping[int, FieldReader]) -> None:
        """Initialize the table.

        Args:
            readers: Mapping from key (0-255) to field reader

        Raises:
            ValueError: If a key is outside 0-255
        """
        for key in readers:
            if not 0 <= key <= 0xFF:
                raise ValueError(f"Attribute key must be 0-255, got {key}")
        self._readers = dict(readers)

    def __call__(self, key: int, head: H) -> Optional[Continuation[H]]:
        field_reader = self._readers.get(key)
        if field_reader is None:
            return None
        return field_reader(head)

    def __contains__(self, key: int) -> bool:
        return key in self._readers

    def keys(self) -> list[int]:
        """Return the recognized keys in ascending order."""
        return sorted(self._readers)


def no_known_keys(key: int, head: None) -> None:
    """Key handler that recognizes nothing."""
    return None


def no_fields(head: None) -> list[Tuple[int, SizedWriter]]:
    """Field policy that emits nothing."""
    return []

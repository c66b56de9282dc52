"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Optional

import pytest

from attrframe import KeyTable, SizedWriter
from attrframe.codec import sized
from attrframe.codec.cursor import ByteReader


def read_byte_into(name: str) -> Any:
    """Field reader storing one byte under name in a dict head."""

    def field_reader(head: dict[str, int]) -> Any:
        def read(reader: ByteReader) -> dict[str, int]:
            return {**head, name: reader.read_byte()}

        return read

    return field_reader


def byte_fields(head: dict[str, int]) -> list[tuple[int, SizedWriter]]:
    """Field policy emitting 'a' under key 1 and 'b' under key 2 as single bytes."""
    keys = {"a": 1, "b": 2}
    return [(keys[name], sized.byte(value)) for name, value in head.items()]


@pytest.fixture
def byte_table() -> KeyTable:
    """Key handler recognizing key 1 as 'a' and key 2 as 'b'."""
    return KeyTable({1: read_byte_into("a"), 2: read_byte_into("b")})


@pytest.fixture
def unit_frame() -> bytes:
    """Frame of five payload bytes that no key handler in the tests recognizes."""
    return b"\x05\x01\x02\x03\x04\x05"


@pytest.fixture
def frame_limit() -> Optional[int]:
    """Default frame limit for limited decoding tests."""
    return 4


@pytest.fixture
def byte_policy() -> Any:
    """Field policy matching byte_table."""
    return byte_fields

"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from attrframe import __version__
from attrframe.cli.main import main

SCHEMA_SOURCE = '''
from typing import ClassVar, Optional

from attrframe import AttrField, AttributeModel, BoundedAttr


class AddressAttributes(AttributeModel):
    derivation_path: Optional[bytes] = AttrField(key=1)
    network_magic: Optional[int] = BoundedAttr(key=2, le=0xFFFFFFFF)

    attr_max_frame_length: ClassVar[Optional[int]] = 128
'''


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "attrframe.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "attrframe: Extensible Attribute Frames" in result.stdout
    assert "--analyze" in result.stdout
    assert "--dump" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "attrframe.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert f"attrframe {__version__}" in result.stdout


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no arguments prints help."""
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out


def test_cli_analyze(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --analyze lists keys and codecs."""
    schema_file = tmp_path / "schemas.py"
    schema_file.write_text(SCHEMA_SOURCE)

    assert main(["--analyze", str(schema_file)]) == 0

    out = capsys.readouterr().out
    assert "1 schema loaded." in out
    assert "= AddressAttributes =" in out
    assert "Frame limit: 128 bytes" in out
    assert "derivation_path" in out
    assert "bytes (varint length)" in out
    assert "uint (4 bytes)" in out


def test_cli_analyze_no_models(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --analyze on a file without schemas."""
    empty_file = tmp_path / "empty.py"
    empty_file.write_text("x = 1\n")

    assert main(["--analyze", str(empty_file)]) == 0
    assert "No AttributeModel classes found" in capsys.readouterr().out


def test_cli_analyze_nonexistent_file(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --analyze with nonexistent file."""
    assert main(["--analyze", "nonexistent_file.py"]) == 1
    assert "File not found" in capsys.readouterr().err


def test_cli_dump(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --dump shows the payload layout."""
    assert main(["--dump", "050102030405"]) == 0

    out = capsys.readouterr().out
    assert "Payload: 5 bytes" in out
    assert "First key: 1" in out
    assert "01 02 03 04 05" in out


def test_cli_dump_empty_frame(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --dump with an empty frame."""
    assert main(["--dump", "00"]) == 0
    assert "<no attributes>" in capsys.readouterr().out


def test_cli_dump_fixed_prefix(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --dump with a fixed-width prefix."""
    assert main(["--dump", "0200aabb", "--length-prefix", "u16", "--byte-order", "little"]) == 0
    out = capsys.readouterr().out
    assert "u16 (2 bytes)" in out
    assert "aa bb" in out


def test_cli_dump_too_large(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --dump honours --max-length."""
    assert main(["--dump", "050102030405", "--max-length", "4"]) == 1
    assert "exceeds limit" in capsys.readouterr().err


def test_cli_dump_truncated(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --dump with a truncated frame."""
    assert main(["--dump", "0501"]) == 1
    assert "Error decoding frame" in capsys.readouterr().err


def test_cli_dump_bad_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --dump with invalid hex."""
    assert main(["--dump", "zz"]) == 1
    assert "invalid hex" in capsys.readouterr().err

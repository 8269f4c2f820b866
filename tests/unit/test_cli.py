"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from ipmitext import __version__
from ipmitext.cli.main import main

SAMPLE_BLOCK_HEX = "ff ff 03 ff 03 03 04 05 ff 07 07 08 09 ff 0b"


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "ipmitext.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "ipmitext: IPMI FRU/SDR text codecs" in result.stdout
    assert "checksum" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "ipmitext.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert f"ipmitext {__version__}" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = subprocess.run(
        [sys.executable, "-m", "ipmitext.cli.main"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "ipmitext: IPMI FRU/SDR text codecs" in result.stdout


def test_cli_demo() -> None:
    """Test the demo command end to end."""
    result = subprocess.run(
        [sys.executable, "-m", "ipmitext.cli.main", "demo"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "00000000  12 3b 45 6b 7c 89 0a" in result.stdout
    assert "padded: true" in result.stdout
    assert "decoded: '123-456-7.890 '" in result.stdout
    assert "00000000  29 dc a6 f4 fb b2 40 24  01" in result.stdout
    assert "decoded (trimmed): 'IPMITOOL 12'" in result.stdout
    assert "(sum 55): 201" in result.stdout


def test_cli_encode_bcd(capsys: pytest.CaptureFixture[str]) -> None:
    """Test encoding BCD Plus."""
    assert main(["encode", "bcd", "123-456-7.890"]) == 0
    assert capsys.readouterr().out == "12 3b 45 6b 7c 89 0a\npadded: true\n"


def test_cli_encode_packed6(capsys: pytest.CaptureFixture[str]) -> None:
    """Test encoding packed 6-bit ASCII with upper-case output."""
    assert main(["--upper", "encode", "packed6", "IPMITOOL 12"]) == 0
    assert capsys.readouterr().out == "29 DC A6 F4 FB B2 40 24 01\n"


def test_cli_encode_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    """Test an invalid character reports an error."""
    assert main(["encode", "packed6", "abc"]) == 1
    assert "Error: invalid char 'a'" in capsys.readouterr().err


def test_cli_decode_packed6(capsys: pytest.CaptureFixture[str]) -> None:
    """Test decoding packed 6-bit ASCII with and without trim."""
    assert main(["decode", "packed6", "29dca6f4fbb2402401"]) == 0
    assert capsys.readouterr().out == "'IPMITOOL 12 '\n"

    assert main(["decode", "packed6", "29dca6f4fbb2402401", "--trim"]) == 0
    assert capsys.readouterr().out == "'IPMITOOL 12'\n"

    assert main(["decode", "packed6", "0x29dca6f4fbb2402401", "--length", "11"]) == 0
    assert capsys.readouterr().out == "'IPMITOOL 12'\n"


def test_cli_decode_bcd(capsys: pytest.CaptureFixture[str]) -> None:
    """Test decoding BCD Plus."""
    assert main(["decode", "bcd", "12:3b:45", "--trim"]) == 0
    assert capsys.readouterr().out == "'123-45'\n"


def test_cli_decode_bcd_invalid_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Test an unassigned nibble reports an error."""
    assert main(["decode", "bcd", "1f"]) == 1
    assert "lower nibble of byte #0" in capsys.readouterr().err


def test_cli_decode_bcd_rejects_length(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --length is refused for BCD Plus."""
    assert main(["decode", "bcd", "12", "--length", "2"]) == 1
    assert "packed6 only" in capsys.readouterr().err


def test_cli_decode_bad_hex(capsys: pytest.CaptureFixture[str]) -> None:
    """Test malformed hex input."""
    assert main(["decode", "bcd", "xyz"]) == 1
    assert "Invalid hex input" in capsys.readouterr().err


def test_cli_checksum(capsys: pytest.CaptureFixture[str]) -> None:
    """Test the checksum command."""
    assert main(["checksum", SAMPLE_BLOCK_HEX]) == 0
    assert capsys.readouterr().out == "0xc9 (201)\n"

    assert main(["checksum", "ff 01 02 03", "--start", "1", "--count", "3"]) == 0
    assert capsys.readouterr().out == "0xfa (250)\n"


def test_cli_checksum_out_of_range(capsys: pytest.CaptureFixture[str]) -> None:
    """Test an out-of-range start."""
    assert main(["checksum", "01 02", "--start", "2"]) == 1
    assert "invalid start value (2)" in capsys.readouterr().err


def test_cli_field(capsys: pytest.CaptureFixture[str]) -> None:
    """Test field encode and decode."""
    assert main(["field", "encode", "1234"]) == 0
    assert capsys.readouterr().out == "42 12 34\n"

    assert main(["field", "encode", "12", "--type", "packed6"]) == 0
    assert capsys.readouterr().out == "82 91 04\n"

    assert main(["field", "decode", "421234"]) == 0
    assert capsys.readouterr().out == "BCD_PLUS '1234'\n"


def test_cli_invalid_hex_width(capsys: pytest.CaptureFixture[str]) -> None:
    """Test configuration errors are reported."""
    assert main(["--hex-width", "0", "demo"]) == 1
    assert "hex_width" in capsys.readouterr().err

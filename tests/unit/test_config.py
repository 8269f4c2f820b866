"""Unit tests for CLI configuration."""

from __future__ import annotations

import argparse

import pytest

from ipmitext.config import CliConfig


class TestCliConfig:
    """Test CliConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = CliConfig()

        assert config.trim is False
        assert config.hex_width == 16
        assert config.uppercase is False
        assert config.verbose is False

    def test_invalid_hex_width(self) -> None:
        """Test hex_width bounds."""
        with pytest.raises(ValueError, match="hex_width"):
            CliConfig(hex_width=0)

        with pytest.raises(ValueError, match="hex_width"):
            CliConfig(hex_width=65)

    def test_from_args(self) -> None:
        """Test building from a parsed namespace."""
        args = argparse.Namespace(trim=True, hex_width=8, upper=True, verbose=False)
        config = CliConfig.from_args(args)

        assert config == CliConfig(trim=True, hex_width=8, uppercase=True, verbose=False)

    def test_from_args_missing_options(self) -> None:
        """Test options absent from the namespace keep defaults."""
        assert CliConfig.from_args(argparse.Namespace()) == CliConfig()

    def test_format_hex(self) -> None:
        """Test hex formatting honours uppercase."""
        assert CliConfig().format_hex(b"\x12\xab") == "12 ab"
        assert CliConfig(uppercase=True).format_hex(b"\x12\xab") == "12 AB"

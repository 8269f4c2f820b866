"""Configuration for the ipmitext command-line tool.

This module provides the dataclass holding output and decoding options
shared by all CLI commands.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass
class CliConfig:
    """Options controlling how the CLI decodes and prints data.

    Attributes:
        trim: Strip trailing space padding from decoded text (default False)
        hex_width: Bytes per line in hex dumps (default 16, range 1-64)
        uppercase: Print hex digits in upper case (default False)
        verbose: Enable DEBUG logging (default False)

    Examples:
        ```python
        from ipmitext.config import CliConfig

        config = CliConfig(trim=True, hex_width=8)
        ```
    """

    trim: bool = False
    hex_width: int = 16
    uppercase: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 1 <= self.hex_width <= 64:
            raise ValueError(f"hex_width must be 1-64, got {self.hex_width}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> CliConfig:
        """Build a config from parsed command-line arguments.

        Options missing from the namespace keep their defaults.
        """
        return cls(
            trim=getattr(args, "trim", False),
            hex_width=getattr(args, "hex_width", 16),
            uppercase=getattr(args, "upper", False),
            verbose=getattr(args, "verbose", False),
        )

    def format_hex(self, data: bytes) -> str:
        """Render *data* as space-separated hex bytes."""
        text = data.hex(" ")
        return text.upper() if self.uppercase else text

"""Utility functions for ipmitext.

This module provides the zero checksum and hex dump formatting.
"""

from __future__ import annotations

from .checksum import verify_zero_checksum, zero_checksum
from .hexdump import hex_dump

__all__ = [
    # Checksum functions
    "zero_checksum",
    "verify_zero_checksum",
    # Formatting
    "hex_dump",
]

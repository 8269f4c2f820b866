"""Demonstration command printing sample encodings."""

from __future__ import annotations

import argparse

from ..codec import decode_bcd_plus, decode_packed6, encode_bcd_plus, encode_packed6
from ..config import CliConfig
from ..utils import hex_dump, zero_checksum

SAMPLE_BCD_PLUS = "123-456-7.890"
SAMPLE_PACKED6 = "IPMITOOL 12"
SAMPLE_BLOCK = bytes(
    [0xFF, 0xFF, 0x03, 0xFF, 0x03, 0x03, 0x04, 0x05, 0xFF, 0x07, 0x07, 0x08, 0x09, 0xFF, 0x0B]
)


def run_demo(args: argparse.Namespace, config: CliConfig) -> None:
    """Encode and decode the sample strings and checksum the sample block.

    Args:
        args: Parsed command-line arguments (unused)
        config: Output options
    """
    data, padded = encode_bcd_plus(SAMPLE_BCD_PLUS)
    print(f"BCD Plus {SAMPLE_BCD_PLUS!r} -> {len(data)} bytes (padded: {'true' if padded else 'false'})")
    print(hex_dump(data, config.hex_width, config.uppercase), end="")
    print(f"decoded: {decode_bcd_plus(data)!r}")
    print()

    packed = encode_packed6(SAMPLE_PACKED6)
    print(f"Packed 6-bit ASCII {SAMPLE_PACKED6!r} -> {len(packed)} bytes")
    print(hex_dump(packed, config.hex_width, config.uppercase), end="")
    print(f"decoded (trimmed): {decode_packed6(packed, trim=True)!r}")
    print()

    raw_sum = sum(SAMPLE_BLOCK) & 0xFF
    checksum = zero_checksum(SAMPLE_BLOCK)
    print(f"Zero checksum of {len(SAMPLE_BLOCK)}-byte block (sum {raw_sum}): {checksum}")

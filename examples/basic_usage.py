#!/usr/bin/env python3
"""Basic usage example for ipmitext.

This example demonstrates:
1. Encoding and decoding BCD Plus
2. Encoding and decoding packed 6-bit ASCII
3. Handling characters outside an alphabet
4. Calculating a zero checksum
"""

from __future__ import annotations

from ipmitext import (
    InvalidCharacterError,
    decode_bcd_plus,
    decode_packed6,
    encode_bcd_plus,
    encode_packed6,
    verify_zero_checksum,
    zero_checksum,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("ipmitext Basic Usage Example")
    print("=" * 60)
    print()

    # BCD Plus: two characters per byte
    print("1. BCD Plus...")
    serial = "123-456-7.890"
    data, padded = encode_bcd_plus(serial)
    print(f"   Text: {serial!r} ({len(serial)} chars)")
    print(f"   Encoded: {data.hex(' ')} ({len(data)} bytes, padded={padded})")
    print(f"   Decoded: {decode_bcd_plus(data)!r}")
    print(f"   Decoded (trim): {decode_bcd_plus(data, trim=True)!r}")
    print()

    # Packed 6-bit ASCII: four characters per three bytes
    print("2. Packed 6-bit ASCII...")
    name = "IPMITOOL 12"
    packed = encode_packed6(name)
    print(f"   Text: {name!r} ({len(name)} chars)")
    print(f"   Encoded: {packed.hex(' ')} ({len(packed)} bytes)")
    print(f"   Decoded: {decode_packed6(packed)!r}")
    print(f"   Decoded (length={len(name)}): {decode_packed6(packed, length=len(name))!r}")
    print()

    # Alphabet errors
    print("3. Characters outside the alphabet...")
    try:
        encode_packed6("lower case")
    except InvalidCharacterError as e:
        print(f"   {type(e).__name__}: symbol={e.symbol!r} index={e.index}")
    print()

    # Zero checksum
    print("4. Zero checksum...")
    block = bytes([0xFF, 0xFF, 0x03, 0xFF, 0x03, 0x03, 0x04, 0x05, 0xFF, 0x07, 0x07, 0x08, 0x09, 0xFF, 0x0B])
    checksum = zero_checksum(block)
    print(f"   Sum mod 256: {sum(block) % 256}")
    print(f"   Checksum: {checksum} (0x{checksum:02x})")
    print(f"   Verified: {verify_zero_checksum(block + bytes([checksum]))}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()

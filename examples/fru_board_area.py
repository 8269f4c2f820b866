#!/usr/bin/env python3
"""FRU board info area example for ipmitext.

This example demonstrates:
1. Validating board fields with Pydantic
2. Encoding them behind type/length bytes
3. Padding and checksumming the area
4. Parsing the area back
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel

from ipmitext import encode_fields, hex_dump, iter_fields, verify_zero_checksum, zero_checksum
from ipmitext.models import BcdPlusStr, Packed6Str


class BoardInfo(BaseModel):
    """Board info area text fields."""

    manufacturer: Annotated[str, Packed6Str(max_length=32)]
    product_name: Annotated[str, Packed6Str(max_length=32)]
    serial_number: Annotated[str, BcdPlusStr(max_length=20)]
    part_number: Annotated[str, Packed6Str(max_length=32)]


def main() -> None:
    """Run the board area example."""
    print("=" * 60)
    print("ipmitext FRU Board Area Example")
    print("=" * 60)
    print()

    board = BoardInfo(
        manufacturer="ACME",
        product_name="IPMITOOL 12",
        serial_number="0042-7.1",
        part_number="PN-100_A",
    )

    # Header: format version, length (filled in below), language, mfg date
    area = bytearray([0x01, 0x00, 0x00, 0x10, 0x20, 0x30])
    area.extend(encode_fields(board.model_dump().values()))
    area.extend(b"\x00" * (-(len(area) + 1) % 8))
    area[1] = (len(area) + 1) // 8
    area.append(zero_checksum(area))

    print(f"1. Encoded area ({len(area)} bytes):")
    print(hex_dump(area), end="")
    print()

    print(f"2. Checksum valid: {verify_zero_checksum(area)}")
    print()

    print("3. Parsed fields:")
    for field in iter_fields(area, 6):
        print(f"   {field.type_code.name:<8} {field.text!r} ({field.size} bytes)")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()

"""Hex dump formatting."""

from __future__ import annotations

from .._types import BytesLike


def hex_dump(data: BytesLike, width: int = 16, uppercase: bool = False) -> str:
    """Format *data* as a canonical hex dump.

    Each line holds the offset, ``width`` hex bytes (split in two halves) and
    the printable ASCII rendering between bars::

        00000000  12 3b 45 6b 7c 89 0a                              |.;Ek|..|

    Args:
        data: Bytes to dump
        width: Bytes per line (1-64)
        uppercase: Use upper-case hex digits

    Returns:
        The dump, one line per row with a trailing newline, or "" for empty data

    Raises:
        ValueError: If width is out of range
    """
    if not 1 <= width <= 64:
        raise ValueError(f"width must be 1-64, got {width}")

    data = bytes(data)
    byte_format = "{:02X}" if uppercase else "{:02x}"
    half = (width + 1) // 2
    lines = []
    for offset in range(0, len(data), width):
        row = data[offset : offset + width]
        cells = [byte_format.format(b) for b in row]
        cells += ["  "] * (width - len(row))
        hex_part = " ".join(cells[:half])
        if cells[half:]:
            hex_part += "  " + " ".join(cells[half:])
        ascii_part = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in row)
        lines.append(f"{offset:08x}  {hex_part}  |{ascii_part}|\n")

    return "".join(lines)

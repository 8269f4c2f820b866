"""Zero checksum used by IPMI FRU areas and SDR records.

A zero checksum is the byte that makes the 8-bit sum of a block, checksum
included, equal to zero.
"""

from __future__ import annotations

from typing import Optional

from .._types import BytesLike
from ..exceptions import OutOfRangeError


def zero_checksum(data: BytesLike, start: int = 0, count: Optional[int] = None) -> int:
    """Calculate the zero checksum of ``data[start:start + count]``.

    Args:
        data: Data to checksum
        start: Offset of the first byte, in ``[0, len(data) - 1]``
        count: Number of bytes to sum, in ``[0, len(data) - start]``
            (default: everything from start to the end)

    Returns:
        Checksum byte (0-255), the two's complement of the truncated sum

    Raises:
        OutOfRangeError: If start or count lies outside the buffer

    Example:
        >>> zero_checksum(b"\\x01\\x02\\x03")
        250
    """
    length = len(data)
    if start < 0 or start >= length:
        raise OutOfRangeError("start", start, 0, length - 1)
    if count is None:
        count = length - start
    elif count < 0 or count > length - start:
        raise OutOfRangeError("count", count, 0, length - start)

    total = 0
    for byte in data[start : start + count]:
        total = (total + byte) & 0xFF

    return (~total + 1) & 0xFF


def verify_zero_checksum(data: BytesLike) -> bool:
    """Verify a block that ends with its zero checksum.

    Args:
        data: Block including the trailing checksum byte

    Returns:
        True if the bytes sum to zero modulo 256, False otherwise

    Example:
        >>> verify_zero_checksum(b"\\x01\\x02\\x03\\xfa")
        True
    """
    return sum(data) & 0xFF == 0

"""Packed 6-bit ASCII codec.

Each character in the range 0x20-0x5F is reduced to a 6-bit value
(``ord(char) - 0x20``) and the values are packed least-significant-bit first,
four characters into every three bytes::

    byte0 = c0[5:0]        | c1[1:0] << 6
    byte1 = c1[5:2]        | c2[3:0] << 4
    byte2 = c2[5:4]        | c3[5:0] << 2

A trailing partial group keeps whatever bytes its bits touch, so ``m``
characters always occupy ``ceil(6 * m / 8)`` bytes.
"""

from __future__ import annotations

import logging
from typing import Optional

from .._types import BytesLike
from ..exceptions import DecodeError, InvalidCharacterError

logger = logging.getLogger(__name__)

FIRST_PACKED6_CHAR = 0x20  # ASCII space
LAST_PACKED6_CHAR = 0x5F  # ASCII '_'


class SixBitPacker:
    """Packs 6-bit values into bytes, four values per three bytes.

    The packer is a small state machine: ``phase`` is the position of the next
    value within the 4-value cycle and ``carry`` holds the bits of the current
    byte that have not been emitted yet.

    Example:
        >>> packer = SixBitPacker()
        >>> for value in (0x29, 0x30, 0x2D, 0x29):
        ...     packer.write(value)
        >>> packer.to_bytes()
        b')\\xdc\\xa6'
    """

    def __init__(self) -> None:
        """Initialize an empty packer."""
        self._out = bytearray()
        self.carry = 0
        self.phase = 0

    def write(self, value: int) -> None:
        """Append one 6-bit value.

        Args:
            value: Integer in 0-63

        Raises:
            ValueError: If value does not fit in 6 bits
        """
        if not 0 <= value <= 0x3F:
            raise ValueError(f"6-bit value must be 0-63, got {value}")

        if self.phase == 0:
            self.carry = value
        elif self.phase == 1:
            self._out.append(((value & 0x03) << 6) | self.carry)
            self.carry = value >> 2
        elif self.phase == 2:
            self._out.append(((value & 0x0F) << 4) | self.carry)
            self.carry = value >> 4
        else:
            self._out.append((value << 2) | self.carry)
            self.carry = 0
        self.phase = (self.phase + 1) % 4

    def to_bytes(self) -> bytes:
        """Return the packed bytes, flushing a partially filled final byte.

        Returns:
            Packed bytes
        """
        if self.phase == 0:
            return bytes(self._out)
        return bytes(self._out) + bytes([self.carry])


class SixBitUnpacker:
    """Unpacks 6-bit values from bytes, the inverse of :class:`SixBitPacker`.

    ``phase`` is the position of the next byte within the 3-byte cycle and
    ``carry`` holds the low bits of a value that started in the previous byte.
    """

    def __init__(self) -> None:
        """Initialize an unpacker at the start of a cycle."""
        self.carry = 0
        self.phase = 0

    def feed(self, byte: int) -> list[int]:
        """Consume one byte and return the values it completes.

        A value that straddles a byte boundary is returned with the byte that
        holds its low bits, so every byte yields at least one value and the
        third byte of a cycle yields two.

        Args:
            byte: Integer in 0-255

        Returns:
            One or two 6-bit values
        """
        if self.phase == 0:
            values = [byte & 0x3F]
            self.carry = byte >> 6
        elif self.phase == 1:
            values = [((byte & 0x0F) << 2) | self.carry]
            self.carry = byte >> 4
        else:
            values = [((byte & 0x03) << 4) | self.carry, byte >> 2]
            self.carry = 0
        self.phase = (self.phase + 1) % 3
        return values


def is_packed6(text: str) -> bool:
    """Return True if every character of *text* is in the 0x20-0x5F range."""
    return all(FIRST_PACKED6_CHAR <= ord(char) <= LAST_PACKED6_CHAR for char in text)


def packed6_size(num_chars: int) -> int:
    """Return the number of bytes needed to pack *num_chars* characters."""
    return (num_chars // 4) * 3 + num_chars % 4


def packed6_capacity(num_bytes: int) -> int:
    """Return the number of characters decoded from *num_bytes* bytes."""
    return (num_bytes // 3) * 4 + num_bytes % 3


def encode_packed6(text: str) -> bytes:
    """Encode *text* to packed 6-bit ASCII.

    Args:
        text: Characters in the range 0x20 (' ') to 0x5F ('_')

    Returns:
        Packed bytes, ``packed6_size(len(text))`` long

    Raises:
        InvalidCharacterError: If a character is outside 0x20-0x5F

    Example:
        >>> encode_packed6("IPMI").hex()
        '29dca6'
    """
    packer = SixBitPacker()
    for index, char in enumerate(text):
        code = ord(char)
        if code < FIRST_PACKED6_CHAR or code > LAST_PACKED6_CHAR:
            raise InvalidCharacterError(
                f"invalid char {char!r} for Packed 6-bit ASCII encoding "
                f"at index {index} of {text!r}",
                symbol=char,
                index=index,
            )
        packer.write(code - FIRST_PACKED6_CHAR)

    data = packer.to_bytes()
    logger.debug("Packed 6-bit ASCII encoded %d chars into %d bytes", len(text), len(data))
    return data


def decode_packed6(data: BytesLike, trim: bool = False, length: Optional[int] = None) -> str:
    """Decode packed 6-bit ASCII bytes.

    Every full 3-byte group yields four characters; a trailing group of one or
    two bytes yields one or two characters. Decoding cannot fail on content:
    every 6-bit value maps to a printable character.

    Args:
        data: Packed bytes
        trim: If True, strip trailing spaces from the result
        length: Character count of the original text, if known. Three
            trailing characters share their last byte with an empty fourth
            slot that otherwise decodes as a space.

    Returns:
        Decoded text

    Raises:
        ValueError: If length is negative
        DecodeError: If length exceeds what data can hold
    """
    data = bytes(data)
    capacity = packed6_capacity(len(data))
    if length is not None:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        if length > capacity:
            raise DecodeError(
                f"{len(data)} bytes hold at most {capacity} packed 6-bit chars, "
                f"{length} requested"
            )

    unpacker = SixBitUnpacker()
    chars = []
    for byte in data:
        for value in unpacker.feed(byte):
            chars.append(chr(value + FIRST_PACKED6_CHAR))

    text = "".join(chars)
    if length is not None:
        text = text[:length]
    if trim:
        return text.rstrip(" ")
    return text

"""BCD Plus codec.

BCD Plus stores two characters per byte, one 4-bit code per nibble with the
first character in the high nibble. Code mapping::

    0x0-0x9 <-> '0'-'9'
    0xa     <-> ' '
    0xb     <-> '-'
    0xc     <-> '.'

Codes 0xd-0xf are unassigned and rejected on decode.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .._types import BytesLike
from ..exceptions import InvalidCharacterError, InvalidCodeError

logger = logging.getLogger(__name__)

BCD_PLUS_CODES = "0123456789 -."
BCD_PLUS_SPACE = 0x0A

_CODE_OF = {char: code for code, char in enumerate(BCD_PLUS_CODES)}


class BcdPlusEncoding(NamedTuple):
    """Result of :func:`encode_bcd_plus`.

    Attributes:
        data: Encoded bytes
        padded: True if a space code was appended to fill the last low nibble
    """

    data: bytes
    padded: bool


def is_bcd_plus(text: str) -> bool:
    """Return True if every character of *text* has a BCD Plus code."""
    return all(char in _CODE_OF for char in text)


def encode_bcd_plus(text: str) -> BcdPlusEncoding:
    """Encode *text* to BCD Plus.

    Characters are taken in pairs; the first goes to the high nibble. An odd
    trailing character is completed with the space code in the low nibble.

    Args:
        text: Characters from ``"0123456789 -."``

    Returns:
        ``BcdPlusEncoding(data, padded)`` where ``len(data) == ceil(len(text) / 2)``
        and ``padded`` is True iff ``len(text)`` is odd

    Raises:
        InvalidCharacterError: If a character has no BCD Plus code

    Example:
        >>> encode_bcd_plus("12-3")
        BcdPlusEncoding(data=b'\\x12\\xb3', padded=False)
    """
    codes = []
    for index, char in enumerate(text):
        code = _CODE_OF.get(char)
        if code is None:
            raise InvalidCharacterError(
                f"invalid char {char!r} for BCD Plus encoding at index {index} of {text!r}",
                symbol=char,
                index=index,
            )
        codes.append(code)

    padded = len(codes) % 2 != 0
    if padded:
        codes.append(BCD_PLUS_SPACE)

    result = bytearray()
    for i in range(0, len(codes), 2):
        result.append((codes[i] << 4) | codes[i + 1])

    logger.debug("BCD Plus encoded %d chars into %d bytes (padded=%s)", len(text), len(result), padded)
    return BcdPlusEncoding(bytes(result), padded)


def decode_bcd_plus(data: BytesLike, trim: bool = False) -> str:
    """Decode BCD Plus bytes.

    Args:
        data: Encoded bytes
        trim: If True, strip trailing spaces (padding) from the result

    Returns:
        Decoded text; ``2 * len(data)`` characters unless trimmed

    Raises:
        InvalidCodeError: If a nibble holds an unassigned code (13-15)
    """
    data = bytes(data)
    chars = []
    for index, byte in enumerate(data):
        for nibble, code in (("upper", byte >> 4), ("lower", byte & 0x0F)):
            if code >= len(BCD_PLUS_CODES):
                raise InvalidCodeError(
                    f"invalid BCD Plus code ({code}) in {nibble} nibble "
                    f"of byte #{index} of {data!r}",
                    symbol=code,
                    index=index,
                    nibble=nibble,
                )
            chars.append(BCD_PLUS_CODES[code])

    text = "".join(chars)
    if trim:
        return text.rstrip(" ")
    return text

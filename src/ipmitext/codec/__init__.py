"""Text codecs for ipmitext.

This module provides the BCD Plus and packed 6-bit ASCII codecs used by
IPMI FRU and SDR records.
"""

from __future__ import annotations

from .bcdplus import BCD_PLUS_CODES, BcdPlusEncoding, decode_bcd_plus, encode_bcd_plus, is_bcd_plus
from .packed6 import (
    SixBitPacker,
    SixBitUnpacker,
    decode_packed6,
    encode_packed6,
    is_packed6,
    packed6_capacity,
    packed6_size,
)

__all__ = [
    # BCD Plus
    "BCD_PLUS_CODES",
    "BcdPlusEncoding",
    "encode_bcd_plus",
    "decode_bcd_plus",
    "is_bcd_plus",
    # Packed 6-bit ASCII
    "SixBitPacker",
    "SixBitUnpacker",
    "encode_packed6",
    "decode_packed6",
    "is_packed6",
    "packed6_size",
    "packed6_capacity",
]

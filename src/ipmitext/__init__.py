"""ipmitext: IPMI FRU/SDR Text Codecs

A Python library for the compact text encodings used by IPMI Field Replaceable
Unit (FRU) and Sensor Data Record (SDR) data: BCD Plus (two characters per
byte) and packed 6-bit ASCII (four characters per three bytes), together with
the zero checksum that protects FRU areas.

Key Features:
- BCD Plus and packed 6-bit ASCII encode/decode
- Zero checksum calculation and verification
- FRU type/length field framing
- Pydantic models for validated text fields

Quick Start:
    >>> from ipmitext import encode_bcd_plus, decode_packed6, encode_packed6
    >>>
    >>> data, padded = encode_bcd_plus("123-456-7.890")
    >>> data.hex()
    '123b456b7c890a'
    >>> decode_packed6(encode_packed6("IPMITOOL 12"), trim=True)
    'IPMITOOL 12'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
    BcdPlusEncoding,
    decode_bcd_plus,
    decode_packed6,
    encode_bcd_plus,
    encode_packed6,
    is_bcd_plus,
    is_packed6,
    packed6_capacity,
    packed6_size,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    FieldError,
    InvalidCharacterError,
    InvalidCodeError,
    InvalidSymbolError,
    IpmiTextError,
    OutOfRangeError,
)
from .fields import (
    END_OF_FIELDS,
    DecodedField,
    TypeCode,
    decode_field,
    encode_field,
    encode_fields,
    iter_fields,
)
from .models import BcdPlusStr, Packed6Str, TextField
from .utils import hex_dump, verify_zero_checksum, zero_checksum

__all__ = [
    # BCD Plus
    "BcdPlusEncoding",
    "encode_bcd_plus",
    "decode_bcd_plus",
    "is_bcd_plus",
    # Packed 6-bit ASCII
    "encode_packed6",
    "decode_packed6",
    "is_packed6",
    "packed6_size",
    "packed6_capacity",
    # Exceptions
    "IpmiTextError",
    "EncodeError",
    "DecodeError",
    "InvalidSymbolError",
    "InvalidCharacterError",
    "InvalidCodeError",
    "OutOfRangeError",
    "FieldError",
    # Checksum
    "zero_checksum",
    "verify_zero_checksum",
    # FRU fields
    "TypeCode",
    "DecodedField",
    "END_OF_FIELDS",
    "encode_field",
    "decode_field",
    "encode_fields",
    "iter_fields",
    # Models
    "TextField",
    "BcdPlusStr",
    "Packed6Str",
    # Formatting
    "hex_dump",
    # Version
    "__version__",
]

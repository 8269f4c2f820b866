"""FRU type/length field utilities for ipmitext.

This module provides framing of encoded text behind IPMI FRU
type/length bytes.
"""

from __future__ import annotations

from .typelength import (
    END_OF_FIELDS,
    MAX_FIELD_BYTES,
    DecodedField,
    TypeCode,
    decode_field,
    encode_field,
    encode_fields,
    iter_fields,
    select_type,
    type_length_byte,
)

__all__ = [
    "END_OF_FIELDS",
    "MAX_FIELD_BYTES",
    "TypeCode",
    "DecodedField",
    "type_length_byte",
    "select_type",
    "encode_field",
    "decode_field",
    "encode_fields",
    "iter_fields",
]

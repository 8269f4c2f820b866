"""FRU type/length field framing.

IPMI FRU areas store each text field behind a single type/length byte:

- bits 7:6 - type code (see :class:`TypeCode`)
- bits 5:0 - number of payload bytes that follow (0-63)

A list of fields is terminated by ``0xC1`` (type 3, length 1), a value no
real 1-byte text field uses.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from .._types import BytesLike
from ..codec.bcdplus import decode_bcd_plus, encode_bcd_plus, is_bcd_plus
from ..codec.packed6 import decode_packed6, encode_packed6
from ..exceptions import FieldError

logger = logging.getLogger(__name__)

END_OF_FIELDS = 0xC1
MAX_FIELD_BYTES = 0x3F


class TypeCode(enum.IntEnum):
    """Type code stored in bits 7:6 of a type/length byte."""

    BINARY = 0
    BCD_PLUS = 1
    PACKED6 = 2
    TEXT = 3


ENCODABLE_TYPES = (TypeCode.BCD_PLUS, TypeCode.PACKED6)


@dataclass(frozen=True)
class DecodedField:
    """A field read back from a FRU area.

    Attributes:
        type_code: Type code from the type/length byte
        text: Decoded text
        raw: Encoded payload (without the type/length byte)
        size: Bytes consumed, including the type/length byte
    """

    type_code: TypeCode
    text: str
    raw: bytes
    size: int


def type_length_byte(type_code: TypeCode, length: int) -> int:
    """Build a type/length byte.

    Args:
        type_code: Field type
        length: Payload length in bytes (0-63)

    Returns:
        The type/length byte

    Raises:
        ValueError: If length does not fit in 6 bits
    """
    if not 0 <= length <= MAX_FIELD_BYTES:
        raise ValueError(f"Field length must be 0-{MAX_FIELD_BYTES}, got {length}")
    return (int(type_code) << 6) | length


def select_type(text: str) -> TypeCode:
    """Pick the densest encodable type for *text*."""
    if is_bcd_plus(text):
        return TypeCode.BCD_PLUS
    return TypeCode.PACKED6


def encode_field(text: str, type_code: Optional[TypeCode] = None) -> bytes:
    """Encode *text* as a type/length byte followed by its payload.

    Args:
        text: Field text
        type_code: BCD_PLUS or PACKED6, or None to choose automatically

    Returns:
        Encoded field

    Raises:
        FieldError: If the type is not encodable or the payload exceeds 63 bytes
        InvalidCharacterError: If text is outside the chosen alphabet

    Example:
        >>> encode_field("1234").hex()
        '421234'
    """
    if type_code is None:
        type_code = select_type(text)
    type_code = TypeCode(type_code)

    if type_code is TypeCode.BCD_PLUS:
        payload = encode_bcd_plus(text).data
    elif type_code is TypeCode.PACKED6:
        payload = encode_packed6(text)
    else:
        raise FieldError(f"Cannot encode text as {type_code.name} field")

    if len(payload) > MAX_FIELD_BYTES:
        raise FieldError(
            f"Encoded {type_code.name} field is {len(payload)} bytes, "
            f"maximum is {MAX_FIELD_BYTES}"
        )

    logger.debug("Encoded %s field of %d chars (%d bytes)", type_code.name, len(text), len(payload))
    return bytes([type_length_byte(type_code, len(payload))]) + payload


def decode_field(data: BytesLike, offset: int = 0, trim: bool = True) -> DecodedField:
    """Decode the field starting at ``data[offset]``.

    Args:
        data: Buffer holding one or more fields
        offset: Position of the type/length byte
        trim: Strip trailing spaces from the decoded text

    Returns:
        DecodedField

    Raises:
        FieldError: If the field is truncated, is the end-of-fields marker,
            or is a non-empty field of a type other than BCD_PLUS or PACKED6
        InvalidCodeError: If a BCD Plus payload holds an unassigned code
    """
    data = bytes(data)
    if offset < 0 or offset >= len(data):
        raise FieldError(f"No field at offset {offset} of {len(data)}-byte buffer")

    header = data[offset]
    if header == END_OF_FIELDS:
        raise FieldError(f"End-of-fields marker at offset {offset}")

    type_code = TypeCode(header >> 6)
    length = header & MAX_FIELD_BYTES
    end = offset + 1 + length
    if end > len(data):
        raise FieldError(
            f"Field at offset {offset} needs {length} payload bytes, "
            f"only {len(data) - offset - 1} available"
        )

    raw = data[offset + 1 : end]
    if length == 0:
        text = ""
    elif type_code is TypeCode.BCD_PLUS:
        text = decode_bcd_plus(raw, trim=trim)
    elif type_code is TypeCode.PACKED6:
        text = decode_packed6(raw, trim=trim)
    else:
        raise FieldError(f"Unsupported field type {type_code.name} at offset {offset}")

    return DecodedField(type_code=type_code, text=text, raw=raw, size=1 + length)


def encode_fields(texts: Iterable[str]) -> bytes:
    """Encode several fields and terminate them with the end-of-fields marker."""
    result = bytearray()
    for text in texts:
        result.extend(encode_field(text))
    result.append(END_OF_FIELDS)
    return bytes(result)


def iter_fields(data: BytesLike, offset: int = 0, trim: bool = True) -> Iterator[DecodedField]:
    """Yield fields from *offset* up to the end-of-fields marker.

    Raises:
        FieldError: If the buffer ends before the end-of-fields marker
    """
    data = bytes(data)
    position = offset
    while True:
        if position >= len(data):
            raise FieldError("Missing end-of-fields marker")
        if data[position] == END_OF_FIELDS:
            return
        field = decode_field(data, position, trim=trim)
        yield field
        position += field.size

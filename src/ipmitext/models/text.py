"""Validated FRU text field model."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ..exceptions import IpmiTextError
from ..fields.typelength import (
    ENCODABLE_TYPES,
    TypeCode,
    decode_field,
    encode_field,
    select_type,
)


class TextField(BaseModel):
    """A FRU text field whose value is guaranteed to be encodable.

    When ``type_code`` is omitted the densest encodable type is chosen:
    BCD Plus if every character allows it, packed 6-bit ASCII otherwise.
    Values with trailing spaces are rejected: decoding strips them as padding.

    Example:
        >>> field = TextField(value="IPMITOOL")
        >>> field.type_code
        <TypeCode.PACKED6: 2>
        >>> TextField.from_bytes(field.to_bytes()) == field
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    value: str
    type_code: Optional[TypeCode] = None

    @model_validator(mode="before")
    @classmethod
    def _resolve_type_code(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("type_code") is None:
            value = data.get("value")
            if isinstance(value, str):
                data = {**data, "type_code": select_type(value)}
        return data

    @model_validator(mode="after")
    def _check_encodable(self) -> TextField:
        if self.value != self.value.rstrip(" "):
            raise ValueError(
                f"Trailing spaces in {self.value!r} cannot be stored; "
                "they read back as field padding"
            )
        try:
            encode_field(self.value, self.type_code)
        except IpmiTextError as e:
            raise ValueError(str(e)) from e
        return self

    def to_bytes(self) -> bytes:
        """Return the type/length byte followed by the encoded value."""
        return encode_field(self.value, self.type_code)

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> TextField:
        """Build a TextField from the encoded field at ``data[offset]``.

        Raises:
            FieldError: If the field is malformed or of an unsupported type
        """
        field = decode_field(data, offset)
        type_code = field.type_code
        # Empty fields of any type read back as an empty BCD Plus field
        if not field.raw and type_code not in ENCODABLE_TYPES:
            type_code = None
        return cls(value=field.text, type_code=type_code)

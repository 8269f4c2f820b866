"""Field type helpers for text stored in IPMI records.

This module provides convenience functions that constrain Pydantic ``str``
fields to the BCD Plus or packed 6-bit ASCII alphabet.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

BCD_PLUS_PATTERN = r"^[0-9 .\-]*$"
PACKED6_PATTERN = r"^[\x20-\x5f]*$"


def BcdPlusStr(**kwargs: Any) -> FieldInfo:
    """Create a string field limited to the BCD Plus alphabet.

    Args:
        **kwargs: Additional Field() arguments (max_length, description, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Board(BaseModel):
        ...     serial: Annotated[str, BcdPlusStr(max_length=20)]
    """
    return cast(FieldInfo, Field(pattern=BCD_PLUS_PATTERN, **kwargs))


def Packed6Str(**kwargs: Any) -> FieldInfo:
    """Create a string field limited to characters 0x20-0x5F.

    Args:
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Board(BaseModel):
        ...     manufacturer: Annotated[str, Packed6Str(max_length=32)]
    """
    return cast(FieldInfo, Field(pattern=PACKED6_PATTERN, **kwargs))

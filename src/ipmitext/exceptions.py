"""Exception hierarchy for ipmitext.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from IpmiTextError for easy catching of any ipmitext-specific error.
"""

from __future__ import annotations

from typing import Any


class IpmiTextError(Exception):
    """Base exception for all ipmitext errors."""

    pass


class EncodeError(IpmiTextError):
    """Raised when encoding text fails.

    Examples:
        - Character outside the codec alphabet
        - Encoded payload too large for a type/length field
    """

    pass


class DecodeError(IpmiTextError):
    """Raised when decoding binary data fails.

    Examples:
        - Invalid BCD Plus nibble code
        - Requested character length exceeds the buffer capacity
    """

    pass


class InvalidSymbolError(IpmiTextError):
    """Raised when a character or code falls outside a codec alphabet.

    Attributes:
        symbol: The offending character (encode) or code value (decode)
        index: Position of the offending symbol in the input
    """

    def __init__(self, message: str, *, symbol: Any, index: int) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.index = index


class InvalidCharacterError(InvalidSymbolError, EncodeError):
    """Raised when a source character cannot be encoded."""

    pass


class InvalidCodeError(InvalidSymbolError, DecodeError):
    """Raised when a BCD Plus nibble holds an unassigned code (13-15).

    Attributes:
        nibble: ``"upper"`` or ``"lower"``; ``index`` is the byte position
    """

    def __init__(self, message: str, *, symbol: int, index: int, nibble: str) -> None:
        super().__init__(message, symbol=symbol, index=index)
        self.nibble = nibble


class OutOfRangeError(IpmiTextError, ValueError):
    """Raised when a checksum range violates the buffer bounds.

    Attributes:
        parameter: Name of the offending parameter (``"start"`` or ``"count"``)
        value: The rejected value
        low: Smallest valid value (inclusive)
        high: Largest valid value (inclusive)
    """

    def __init__(self, parameter: str, value: int, low: int, high: int) -> None:
        super().__init__(
            f"invalid {parameter} value ({value}): expected in [{low}...{high}]"
        )
        self.parameter = parameter
        self.value = value
        self.low = low
        self.high = high


class FieldError(IpmiTextError):
    """Raised when a FRU type/length field is malformed.

    Examples:
        - Payload longer than the 63 bytes a type/length byte can describe
        - Truncated payload
        - Unsupported type code
        - Missing end-of-fields marker
    """

    pass

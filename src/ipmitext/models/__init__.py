"""Pydantic models for ipmitext.

This module provides the TextField model and field helpers that constrain
strings to the codec alphabets.
"""

from __future__ import annotations

from .fields import BcdPlusStr, Packed6Str
from .text import TextField

__all__ = [
    "TextField",
    "BcdPlusStr",
    "Packed6Str",
]

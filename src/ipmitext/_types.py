"""Type aliases shared across ipmitext."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

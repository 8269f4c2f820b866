"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_block() -> bytes:
    """15-byte block whose bytes sum to 55 modulo 256."""
    return bytes(
        [0xFF, 0xFF, 0x03, 0xFF, 0x03, 0x03, 0x04, 0x05, 0xFF, 0x07, 0x07, 0x08, 0x09, 0xFF, 0x0B]
    )


@pytest.fixture
def sample_fru_fields() -> list[str]:
    """Text fields as they appear in a board info area."""
    return ["IPMITOOL", "0123456789", "BOARD-1.0"]

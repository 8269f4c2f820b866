"""End-to-end integration tests."""

from __future__ import annotations

import pytest

from ipmitext import (
    END_OF_FIELDS,
    FieldError,
    TextField,
    TypeCode,
    encode_fields,
    iter_fields,
    verify_zero_checksum,
    zero_checksum,
)

BOARD_HEADER_SIZE = 6  # version, length, language, 3-byte manufacturing date


def build_board_area(fields: list[str]) -> bytes:
    """Build a FRU board info area padded to 8 bytes and checksummed."""
    body = bytearray([0x01, 0x00, 0x00, 0x10, 0x20, 0x30])
    body.extend(encode_fields(fields))

    # Pad so that body + checksum is a multiple of 8 bytes
    body.extend(b"\x00" * (-(len(body) + 1) % 8))
    body[1] = (len(body) + 1) // 8
    body.append(zero_checksum(body))
    return bytes(body)


class TestBoardAreaWorkflow:
    """Test building and parsing a complete board info area."""

    def test_build_and_parse(self, sample_fru_fields: list[str]) -> None:
        """Test a board area round trip."""
        area = build_board_area(sample_fru_fields)

        assert len(area) % 8 == 0
        assert area[1] * 8 == len(area)
        assert verify_zero_checksum(area)

        fields = list(iter_fields(area, BOARD_HEADER_SIZE))
        assert [field.text for field in fields] == sample_fru_fields

    def test_checksum_covers_range(self, sample_fru_fields: list[str]) -> None:
        """Test the stored checksum matches the area minus its last byte."""
        area = build_board_area(sample_fru_fields)

        assert area[-1] == zero_checksum(area, 0, len(area) - 1)

    def test_corruption_detected(self, sample_fru_fields: list[str]) -> None:
        """Test a flipped payload bit breaks the checksum."""
        area = bytearray(build_board_area(sample_fru_fields))
        area[BOARD_HEADER_SIZE + 1] ^= 0x01

        assert not verify_zero_checksum(area)

    def test_models_from_area(self, sample_fru_fields: list[str]) -> None:
        """Test TextField models parsed from consecutive offsets."""
        area = build_board_area(sample_fru_fields)

        offset = BOARD_HEADER_SIZE
        models = []
        while area[offset] != END_OF_FIELDS:
            field = TextField.from_bytes(area, offset)
            models.append(field)
            offset += len(field.to_bytes())

        assert [model.value for model in models] == sample_fru_fields
        assert models[1].type_code is TypeCode.BCD_PLUS

    def test_truncated_area(self, sample_fru_fields: list[str]) -> None:
        """Test an area cut inside its field list."""
        area = build_board_area(sample_fru_fields)

        with pytest.raises(FieldError):
            list(iter_fields(area[: BOARD_HEADER_SIZE + 4], BOARD_HEADER_SIZE))

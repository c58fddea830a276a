"""Tests for program header table decoding."""

import pytest

from elf_builder import PHDR_SIZE, ElfImageBuilder, Segment, sample_builder
from rdelf.core.errors import ElfTruncationError
from rdelf.core.models import ByteOrder
from rdelf.parsers.header import decode_elf_header
from rdelf.parsers.program_headers import (
    decode_program_headers,
    decode_program_headers_at,
    segment_flags_str,
    segment_type_name,
)


class TestSegmentFlagsStr:
    """The flag string is three fixed-width columns in R, W, X order."""

    @pytest.mark.parametrize(
        "p_flags, expected",
        [
            (0x0, " " * 8 + " " + " " * 8 + " " + " " * 10),
            (0x1, " " * 8 + " " + " " * 8 + " " + "Executable"),
            (0x2, " " * 8 + " " + "Writable" + " " + " " * 10),
            (0x4, "Readable" + " " + " " * 8 + " " + " " * 10),
            (0x5, "Readable" + " " + " " * 8 + " " + "Executable"),
            (0x6, "Readable Writable" + " " + " " * 10),
            (0x7, "Readable Writable Executable"),
        ],
    )
    def test_columns(self, p_flags, expected):
        assert segment_flags_str(p_flags) == expected

    @pytest.mark.parametrize("p_flags", range(8))
    def test_fixed_width(self, p_flags):
        assert len(segment_flags_str(p_flags)) == 28

    def test_unknown_bits_ignored(self):
        assert segment_flags_str(0xF0000005) == segment_flags_str(0x5)


class TestSegmentTypeName:
    @pytest.mark.parametrize(
        "p_type, expected",
        [
            (0, "NULL"),
            (1, "LOAD"),
            (2, "DYNAMIC"),
            (3, "INTERP"),
            (4, "NOTE"),
            (6, "PHDR"),
            (7, "TLS"),
            (0x6474E550, "GNU_EH_FRAME"),
            (0x6474E551, "GNU_STACK"),
            (0x6474E552, "GNU_RELRO"),
            (0x70000000, "Unknown"),
        ],
    )
    def test_names(self, p_type, expected):
        assert segment_type_name(p_type) == expected


class TestDecodeProgramHeaders:
    """Tests for decode_program_headers() and decode_program_headers_at()."""

    def test_sample_entries(self, sample_image):
        header = decode_elf_header(sample_image)
        entries = decode_program_headers(sample_image, header)

        assert [e.type for e in entries] == ["PHDR", "LOAD", "GNU_STACK"]
        load = entries[1]
        assert load.flags == segment_flags_str(0x5)
        assert load.p_flags == 0x5
        assert load.offset == 0
        assert load.vaddr == 0x400000
        assert load.paddr == 0x400000
        assert load.file_size == 0x1000
        assert load.mem_size == 0x1000
        assert load.align == 0x1000

    def test_big_endian_matches_little_endian(self, sample_image, sample_image_be):
        little = decode_program_headers(sample_image, decode_elf_header(sample_image))
        big = decode_program_headers(sample_image_be, decode_elf_header(sample_image_be))
        assert big == little

    def test_zero_count_is_empty(self):
        image = ElfImageBuilder().build()
        assert decode_program_headers(image, decode_elf_header(image)) == []

    def test_zero_count_ignores_offset(self):
        assert decode_program_headers_at(b"", 0x10000, 0, 56, ByteOrder.LITTLE) == []

    def test_larger_entry_size_is_stride(self):
        builder = sample_builder()
        builder.ph_entry_size = 72
        image = builder.build()
        entries = decode_program_headers(image, decode_elf_header(image))
        assert [e.type for e in entries] == ["PHDR", "LOAD", "GNU_STACK"]
        assert entries[2].align == 0x10

    def test_declared_count_exceeds_table(self):
        builder = sample_builder()
        builder.sections = []
        image = builder.build()
        cut = image[: 64 + 2 * PHDR_SIZE + 10]
        header = decode_elf_header(cut)
        assert header.ph_count == 3

        with pytest.raises(ElfTruncationError) as excinfo:
            decode_program_headers(cut, header)
        err = excinfo.value
        assert err.what == "program header"
        assert err.index == 2
        assert err.offset == 64 + 2 * PHDR_SIZE
        assert err.needed == PHDR_SIZE
        assert err.available == 10
        assert [e.type for e in err.partial] == ["PHDR", "LOAD"]
        assert "program header[2]" in str(err)

    def test_offset_past_end(self, sample_image):
        with pytest.raises(ElfTruncationError) as excinfo:
            decode_program_headers_at(
                sample_image, len(sample_image) + 100, 1, 56, ByteOrder.LITTLE
            )
        assert excinfo.value.available == 0
        assert excinfo.value.partial == []

    def test_unknown_type_decodes(self):
        image = (
            ElfImageBuilder()
            .add_segment(Segment(p_type=0x12345678, p_flags=0x7))
            .build()
        )
        (entry,) = decode_program_headers(image, decode_elf_header(image))
        assert entry.type == "Unknown"
        assert entry.p_type == 0x12345678
        assert entry.flags == "Readable Writable Executable"

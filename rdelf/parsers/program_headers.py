"""
ELF64 Program Header Table Decoder
===================================

Decodes the program header (segment) table described by the ELF header's
``e_phoff`` / ``e_phnum`` / ``e_phentsize`` triple.

Entry *i* starts at ``e_phoff + i * e_phentsize``.  Only the 56-byte
``Elf64_Phdr`` layout is read from that position; any extra bytes a
larger declared entry size reserves are skipped.

``Elf64_Phdr`` layout::

    0   p_type    4      16  p_vaddr   8      40  p_memsz  8
    4   p_flags   4      24  p_paddr   8      48  p_align  8
    8   p_offset  8      32  p_filesz  8
"""

from __future__ import annotations

from rdelf.core.models import ByteOrder, ElfHeaderInfo, ProgramHeaderInfo
from rdelf.parsers.constants import (
    SEGMENT_FLAG_COLUMNS,
    SEGMENT_TYPE_NAMES,
    UNKNOWN,
)
from rdelf.parsers.reader import Buffer, unpack_at

_PHDR_FMT = "IIQQQQQQ"


def segment_type_name(p_type: int) -> str:
    """Display string for a ``p_type`` value."""
    return SEGMENT_TYPE_NAMES.get(p_type, UNKNOWN)


def segment_flags_str(p_flags: int) -> str:
    """Render *p_flags* as three space-separated columns in R, W, X order.

    Each column holds its label when the bit is set and the same number
    of blanks otherwise, so the result always has the same width::

        >>> segment_flags_str(0x5)
        'Readable          Executable'
    """
    return " ".join(
        label if p_flags & bit else " " * len(label)
        for bit, label in SEGMENT_FLAG_COLUMNS
    )


def decode_program_headers_at(
    data: Buffer,
    offset: int,
    count: int,
    entry_size: int,
    byte_order: ByteOrder,
) -> list[ProgramHeaderInfo]:
    """Decode *count* program headers starting at *offset*.

    Args:
        data: Whole-file buffer.
        offset: File offset of the table (``e_phoff``).
        count: Number of entries (``e_phnum``).
        entry_size: Declared stride between entries (``e_phentsize``).
        byte_order: Order established by the identification block.

    Returns:
        Entries in file order.

    Raises:
        ElfTruncationError: If any entry extends past the end of *data*.
            No list is returned; the error's ``partial`` attribute holds
            the entries decoded before the failing one.
    """
    entries: list[ProgramHeaderInfo] = []
    for i in range(count):
        (
            p_type, p_flags, p_offset, p_vaddr,
            p_paddr, p_filesz, p_memsz, p_align,
        ) = unpack_at(
            _PHDR_FMT,
            data,
            offset + i * entry_size,
            byte_order,
            "program header",
            index=i,
            partial=entries,
        )
        entries.append(ProgramHeaderInfo(
            type=segment_type_name(p_type),
            p_type=p_type,
            flags=segment_flags_str(p_flags),
            p_flags=p_flags,
            offset=p_offset,
            vaddr=p_vaddr,
            paddr=p_paddr,
            file_size=p_filesz,
            mem_size=p_memsz,
            align=p_align,
        ))
    return entries


def decode_program_headers(
    data: Buffer,
    header: ElfHeaderInfo,
) -> list[ProgramHeaderInfo]:
    """Decode the program header table *header* describes."""
    return decode_program_headers_at(
        data,
        header.ph_offset,
        header.ph_count,
        header.ph_entry_size,
        header.byte_order,
    )

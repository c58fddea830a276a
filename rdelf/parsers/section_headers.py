"""
ELF64 Section Header Table Decoder
===================================

Decodes the section header table described by the ELF header's
``e_shoff`` / ``e_shnum`` / ``e_shentsize`` triple, and optionally
resolves section names through the section-name string table
(``e_shstrndx``).

Entry *i* starts at ``e_shoff + i * e_shentsize``; only the 64-byte
``Elf64_Shdr`` layout is read from there.

``Elf64_Shdr`` layout::

    0   sh_name    4      24  sh_offset     8      48  sh_addralign  8
    4   sh_type    4      32  sh_size       8      56  sh_entsize    8
    8   sh_flags   8      40  sh_link       4
    16  sh_addr    8      44  sh_info       4
"""

from __future__ import annotations

from rdelf.core.models import ByteOrder, ElfHeaderInfo, SectionHeaderInfo
from rdelf.parsers.constants import (
    SECTION_FLAG_COLUMNS,
    SECTION_TYPE_NAMES,
    SHN_UNDEF,
    UNKNOWN,
)
from rdelf.parsers.reader import Buffer, read_cstring, unpack_at

_SHDR_FMT = "IIQQQQIIQQ"


def section_type_name(sh_type: int) -> str:
    """Display string for an ``sh_type`` value."""
    return SECTION_TYPE_NAMES.get(sh_type, UNKNOWN)


def section_flags_str(sh_flags: int) -> str:
    """Render *sh_flags* as a fixed-width letter code.

    One character per known flag, in the order ``WAXMSILOGTEC``; a
    blank stands in for every flag that is not set::

        >>> section_flags_str(0x1 | 0x4)
        'W X         '
    """
    return "".join(
        letter if sh_flags & bit else " "
        for bit, letter in SECTION_FLAG_COLUMNS
    )


def decode_section_headers_at(
    data: Buffer,
    offset: int,
    count: int,
    entry_size: int,
    byte_order: ByteOrder,
) -> list[SectionHeaderInfo]:
    """Decode *count* section headers starting at *offset*.

    Names are left empty; see :func:`resolve_section_names`.

    Raises:
        ElfTruncationError: If any entry extends past the end of *data*.
            The error's ``partial`` attribute holds the entries decoded
            before the failing one.
    """
    entries: list[SectionHeaderInfo] = []
    for i in range(count):
        (
            sh_name, sh_type, sh_flags, sh_addr,
            sh_offset, sh_size, sh_link, sh_info,
            sh_addralign, sh_entsize,
        ) = unpack_at(
            _SHDR_FMT,
            data,
            offset + i * entry_size,
            byte_order,
            "section header",
            index=i,
            partial=entries,
        )
        entries.append(SectionHeaderInfo(
            name_index=sh_name,
            type=section_type_name(sh_type),
            sh_type=sh_type,
            flags=section_flags_str(sh_flags),
            sh_flags=sh_flags,
            address=sh_addr,
            offset=sh_offset,
            size=sh_size,
            link=sh_link,
            info=sh_info,
            alignment=sh_addralign,
            entry_size=sh_entsize,
        ))
    return entries


def resolve_section_names(
    data: Buffer,
    sections: list[SectionHeaderInfo],
    string_table_index: int,
) -> bool:
    """Fill in ``name`` on every entry of *sections* in place.

    Names come from the section at *string_table_index*.  Nothing is
    changed when that index is ``SHN_UNDEF`` or out of range, or when the
    string table's bytes lie outside *data*.

    Returns:
        ``True`` if names were resolved.
    """
    if string_table_index == SHN_UNDEF or string_table_index >= len(sections):
        return False

    strtab = sections[string_table_index]
    end = strtab.offset + strtab.size
    if end > len(data):
        return False

    strtab_data = data[strtab.offset:end]
    for section in sections:
        section.name = read_cstring(strtab_data, section.name_index)
    return True


def decode_section_headers(
    data: Buffer,
    header: ElfHeaderInfo,
    *,
    resolve_names: bool = True,
) -> list[SectionHeaderInfo]:
    """Decode the section header table *header* describes.

    Args:
        data: Whole-file buffer.
        header: Decoded ELF header.
        resolve_names: Look names up in the section-name string table.
    """
    sections = decode_section_headers_at(
        data,
        header.sh_offset,
        header.sh_count,
        header.sh_entry_size,
        header.byte_order,
    )
    if resolve_names:
        resolve_section_names(data, sections, header.string_table_index)
    return sections

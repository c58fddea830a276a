"""
ELF64 Header Decoder
=====================

Decodes the 48 bytes of ``Elf64_Ehdr`` that follow the identification
block, in the byte order the identification block declares.

Field layout (offsets from the start of the file)::

    16  e_type       2      40  e_shoff      8
    18  e_machine    2      48  e_flags      4
    20  e_version    4      52  e_ehsize     2
    24  e_entry      8      54  e_phentsize  2
    32  e_phoff      8      56  e_phnum      2
                            58  e_shentsize  2
                            60  e_shnum      2
                            62  e_shstrndx   2

The 64-bit layout is used whatever class the identification block names.
"""

from __future__ import annotations

from typing import Optional

from rdelf.core.models import ElfHeaderInfo, ElfIdent
from rdelf.parsers.constants import EI_NIDENT, MACHINE_NAMES, TYPE_NAMES, UNKNOWN
from rdelf.parsers.ident import decode_ident
from rdelf.parsers.reader import Buffer, unpack_at

_EHDR_FMT = "HHIQQQIHHHHHH"


def type_name(e_type: int) -> str:
    """Display string for an ``e_type`` value."""
    return TYPE_NAMES.get(e_type, UNKNOWN)


def machine_name(e_machine: int) -> str:
    """Display string for an ``e_machine`` value."""
    return MACHINE_NAMES.get(e_machine, UNKNOWN)


def decode_elf_header(
    data: Buffer,
    ident: Optional[ElfIdent] = None,
) -> ElfHeaderInfo:
    """Decode the ELF64 file header from *data*.

    Args:
        data: Whole-file buffer; at least 64 bytes.
        ident: Identification block already decoded from *data*.  Decoded
            here when omitted.

    Raises:
        ElfTruncationError: If *data* ends before the 64-byte header does.
    """
    if ident is None:
        ident = decode_ident(data)

    (
        e_type, e_machine, e_version, e_entry,
        e_phoff, e_shoff, e_flags, e_ehsize,
        e_phentsize, e_phnum, e_shentsize, e_shnum,
        e_shstrndx,
    ) = unpack_at(_EHDR_FMT, data, EI_NIDENT, ident.byte_order, "ELF header")

    return ElfHeaderInfo(
        ident=ident,
        type=type_name(e_type),
        e_type=e_type,
        machine=machine_name(e_machine),
        e_machine=e_machine,
        version=e_version,
        entry_point=e_entry,
        ph_offset=e_phoff,
        sh_offset=e_shoff,
        flags=e_flags,
        header_size=e_ehsize,
        ph_entry_size=e_phentsize,
        ph_count=e_phnum,
        sh_entry_size=e_shentsize,
        sh_count=e_shnum,
        string_table_index=e_shstrndx,
    )

"""
rdelf Data Models
==================

Pydantic-based records produced by the ELF decoders.  Each record keeps
both the raw numeric field and, where the field is an enumeration or a
bitmask, the display string the decoder derived from it.

References:
    - TIS Committee. (1995). Executable and Linkable Format (ELF) Specification.
    - System V Application Binary Interface, Edition 4.1.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, Field, field_serializer


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ByteOrder(str, enum.Enum):
    """Byte order used to decode every structured field after ``e_ident``."""
    LITTLE = "little"
    BIG = "big"

    @property
    def struct_prefix(self) -> str:
        """The :mod:`struct` byte-order character for this order."""
        return "<" if self is ByteOrder.LITTLE else ">"


# ---------------------------------------------------------------------------
# Identification block and file header
# ---------------------------------------------------------------------------

class ElfIdent(BaseModel):
    """The 16-byte ``e_ident`` identification block.

    Attributes:
        magic: All 16 raw identification bytes, exactly as read.
        ei_class: Raw class byte (``e_ident[4]``).
        class_name: ``"None"``, ``"ELF32"``, ``"ELF64"``, ``"Num"`` or ``"Unknown"``.
        ei_data: Raw data-encoding byte (``e_ident[5]``).
        data: ``"little endian"``, ``"big endian"`` or ``"unknown"``.
        version: Identification version byte (``e_ident[6]``).
        os_abi: OS/ABI byte (``e_ident[7]``).
        byte_order: Order used for everything decoded after this block.
    """
    magic: bytes = Field(..., min_length=16, max_length=16)
    ei_class: int = 0
    class_name: str = "Unknown"
    ei_data: int = 0
    data: str = "unknown"
    version: int = 0
    os_abi: int = 0
    byte_order: ByteOrder = ByteOrder.BIG

    @property
    def has_elf_magic(self) -> bool:
        """``True`` when the block starts with ``\\x7fELF``."""
        return self.magic[:4] == b"\x7fELF"

    @field_serializer("magic")
    def _serialize_magic(self, magic: bytes) -> str:
        return magic.hex(" ")


class ElfHeaderInfo(BaseModel):
    """Decoded ELF64 file header (``Elf64_Ehdr``)."""
    ident: ElfIdent
    type: str = "Unknown"
    e_type: int = 0
    machine: str = "Unknown"
    e_machine: int = 0
    version: int = 0
    entry_point: int = 0
    ph_offset: int = 0
    sh_offset: int = 0
    flags: int = 0
    header_size: int = 0
    ph_entry_size: int = 0
    ph_count: int = 0
    sh_entry_size: int = 0
    sh_count: int = 0
    string_table_index: int = 0

    @property
    def byte_order(self) -> ByteOrder:
        """Byte order established by the identification block."""
        return self.ident.byte_order


# ---------------------------------------------------------------------------
# Table entries
# ---------------------------------------------------------------------------

class ProgramHeaderInfo(BaseModel):
    """One decoded program header (``Elf64_Phdr``) entry.

    Attributes:
        type: Segment type name (``LOAD``, ``GNU_STACK``, ...).
        p_type: Raw segment type.
        flags: Three fixed-width columns in R, W, X order.
        p_flags: Raw flag bitmask.
        offset: File offset of the segment.
        vaddr: Virtual address of the segment.
        paddr: Physical address of the segment.
        file_size: Segment size in the file.
        mem_size: Segment size in memory.
        align: Segment alignment.
    """
    type: str = "Unknown"
    p_type: int = 0
    flags: str = ""
    p_flags: int = 0
    offset: int = 0
    vaddr: int = 0
    paddr: int = 0
    file_size: int = 0
    mem_size: int = 0
    align: int = 0


class SectionHeaderInfo(BaseModel):
    """One decoded section header (``Elf64_Shdr``) entry.

    Attributes:
        name: Section name from the section-name string table, or ``""``.
        name_index: Raw ``sh_name`` offset into that string table.
        type: Section type name (``PROGBITS``, ``SYMTAB``, ...).
        sh_type: Raw section type.
        flags: Fixed-width letter code, one column per known flag.
        sh_flags: Raw flag bitmask.
        address: Virtual address at execution.
        offset: File offset of the section contents.
        size: Section size in bytes.
        link: Index of an associated section.
        info: Extra type-dependent information.
        alignment: Address alignment constraint.
        entry_size: Entry size for sections holding tables.
    """
    name: str = ""
    name_index: int = 0
    type: str = "Unknown"
    sh_type: int = 0
    flags: str = ""
    sh_flags: int = 0
    address: int = 0
    offset: int = 0
    size: int = 0
    link: int = 0
    info: int = 0
    alignment: int = 0
    entry_size: int = 0


# ---------------------------------------------------------------------------
# Aggregate report
# ---------------------------------------------------------------------------

class ElfReport(BaseModel):
    """Everything decoded from one file.

    Table lists are ``None`` when the caller did not ask for that table,
    and a (possibly empty) list when it did.
    """
    path: str = "<memory>"
    size: int = 0
    header: ElfHeaderInfo
    program_headers: Optional[list[ProgramHeaderInfo]] = None
    section_headers: Optional[list[SectionHeaderInfo]] = None
    warnings: list[str] = Field(default_factory=list)

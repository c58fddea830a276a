"""
Synthetic ELF64 images for tests.

Real binaries differ between machines, so the tests build their inputs
from scratch with :mod:`struct`.  An image is laid out as::

    0x00   ELF header (64 bytes)
    0x40   program header table (if any segments)
    ...    section-name string table bytes (if any sections)
    ...    section header table, 8-byte aligned (if any sections)

Usage:
------
    from elf_builder import ElfImageBuilder, Segment, Section

    image = (
        ElfImageBuilder(byte_order="big")
        .add_segment(Segment(p_type=PT_LOAD, p_flags=PF_R | PF_X))
        .add_section(Section(name=".text", sh_type=SHT_PROGBITS))
        .build()
    )
"""

import struct
from dataclasses import dataclass, field
from typing import Optional

EHDR_FMT = "HHIQQQIHHHHHH"
PHDR_FMT = "IIQQQQQQ"
SHDR_FMT = "IIQQQQIIQQ"

EHDR_SIZE = 64
PHDR_SIZE = 56
SHDR_SIZE = 64

PT_LOAD = 1
PT_PHDR = 6
PT_GNU_STACK = 0x6474E551
PF_X, PF_W, PF_R = 0x1, 0x2, 0x4

SHT_PROGBITS = 1
SHT_NOBITS = 8
SHF_WRITE, SHF_ALLOC, SHF_EXECINSTR = 0x1, 0x2, 0x4


@dataclass
class Segment:
    p_type: int = 1
    p_flags: int = 0
    offset: int = 0
    vaddr: int = 0
    paddr: int = 0
    file_size: int = 0
    mem_size: int = 0
    align: int = 0


@dataclass
class Section:
    name: str = ""
    sh_type: int = 0
    sh_flags: int = 0
    address: int = 0
    offset: int = 0
    size: int = 0
    link: int = 0
    info: int = 0
    alignment: int = 0
    entry_size: int = 0


@dataclass
class ElfImageBuilder:
    """Assemble an ELF64 image field by field.

    ``ph_count`` / ``sh_count`` / ``shstrndx`` override the values the
    builder would otherwise derive, which is how tests declare more
    entries than the image holds.
    """

    byte_order: str = "little"
    magic: bytes = b"\x7fELF"
    ei_class: int = 2
    ei_data: Optional[int] = None
    ei_version: int = 1
    os_abi: int = 0
    e_type: int = 2
    e_machine: int = 62
    e_version: int = 1
    entry: int = 0x401000
    e_flags: int = 0
    ph_entry_size: int = PHDR_SIZE
    sh_entry_size: int = SHDR_SIZE
    ph_count: Optional[int] = None
    sh_count: Optional[int] = None
    shstrndx: Optional[int] = None
    with_shstrtab: bool = True
    segments: list = field(default_factory=list)
    sections: list = field(default_factory=list)

    def add_segment(self, segment: Segment) -> "ElfImageBuilder":
        self.segments.append(segment)
        return self

    def add_section(self, section: Section) -> "ElfImageBuilder":
        self.sections.append(section)
        return self

    @property
    def prefix(self) -> str:
        return "<" if self.byte_order == "little" else ">"

    def _ident(self) -> bytes:
        ei_data = self.ei_data
        if ei_data is None:
            ei_data = 1 if self.byte_order == "little" else 2
        ident = self.magic[:4] + bytes(
            [self.ei_class, ei_data, self.ei_version, self.os_abi]
        )
        return ident.ljust(16, b"\x00")

    def _segment_table(self) -> bytes:
        padding = b"\x00" * (self.ph_entry_size - PHDR_SIZE)
        return b"".join(
            struct.pack(
                self.prefix + PHDR_FMT,
                seg.p_type, seg.p_flags, seg.offset, seg.vaddr,
                seg.paddr, seg.file_size, seg.mem_size, seg.align,
            ) + padding
            for seg in self.segments
        )

    def build(self) -> bytes:
        assert self.ph_entry_size >= PHDR_SIZE
        assert self.sh_entry_size >= SHDR_SIZE

        ph_offset = EHDR_SIZE if self.segments else 0
        body = bytearray(self._segment_table())

        sections = list(self.sections)
        shstrndx = 0
        sh_offset = 0
        section_table = b""
        if sections:
            if self.with_shstrtab:
                sections.append(Section(name=".shstrtab", sh_type=3, alignment=1))
                shstrndx = len(sections) - 1

            strtab = bytearray(b"\x00")
            name_offsets = []
            for sec in sections:
                if sec.name:
                    name_offsets.append(len(strtab))
                    strtab += sec.name.encode("ascii") + b"\x00"
                else:
                    name_offsets.append(0)

            strtab_offset = EHDR_SIZE + len(body)
            body += strtab
            if self.with_shstrtab:
                sections[shstrndx].offset = strtab_offset
                sections[shstrndx].size = len(strtab)

            while (EHDR_SIZE + len(body)) % 8:
                body += b"\x00"
            sh_offset = EHDR_SIZE + len(body)

            padding = b"\x00" * (self.sh_entry_size - SHDR_SIZE)
            section_table = b"".join(
                struct.pack(
                    self.prefix + SHDR_FMT,
                    name_offset, sec.sh_type, sec.sh_flags, sec.address,
                    sec.offset, sec.size, sec.link, sec.info,
                    sec.alignment, sec.entry_size,
                ) + padding
                for name_offset, sec in zip(name_offsets, sections)
            )

        header = self._ident() + struct.pack(
            self.prefix + EHDR_FMT,
            self.e_type,
            self.e_machine,
            self.e_version,
            self.entry,
            ph_offset,
            sh_offset,
            self.e_flags,
            EHDR_SIZE,
            self.ph_entry_size,
            len(self.segments) if self.ph_count is None else self.ph_count,
            self.sh_entry_size,
            len(sections) if self.sh_count is None else self.sh_count,
            shstrndx if self.shstrndx is None else self.shstrndx,
        )
        return header + bytes(body) + section_table


def sample_builder(byte_order: str = "little") -> ElfImageBuilder:
    """A small executable: three segments and four named sections."""
    return (
        ElfImageBuilder(byte_order=byte_order)
        .add_segment(Segment(
            p_type=PT_PHDR, p_flags=PF_R, offset=0x40,
            vaddr=0x400040, paddr=0x400040,
            file_size=0xA8, mem_size=0xA8, align=8,
        ))
        .add_segment(Segment(
            p_type=PT_LOAD, p_flags=PF_R | PF_X, offset=0,
            vaddr=0x400000, paddr=0x400000,
            file_size=0x1000, mem_size=0x1000, align=0x1000,
        ))
        .add_segment(Segment(
            p_type=PT_GNU_STACK, p_flags=PF_R | PF_W, align=0x10,
        ))
        .add_section(Section())
        .add_section(Section(
            name=".text", sh_type=SHT_PROGBITS,
            sh_flags=SHF_ALLOC | SHF_EXECINSTR,
            address=0x401000, offset=0x1000, size=0x200, alignment=16,
        ))
        .add_section(Section(
            name=".data", sh_type=SHT_PROGBITS,
            sh_flags=SHF_WRITE | SHF_ALLOC,
            address=0x402000, offset=0x2000, size=0x40, alignment=8,
        ))
        .add_section(Section(
            name=".bss", sh_type=SHT_NOBITS,
            sh_flags=SHF_WRITE | SHF_ALLOC,
            address=0x402040, offset=0x2040, size=0x80, alignment=32,
        ))
    )


def header_offsets(image: bytes, byte_order: str = "little") -> tuple[int, int]:
    """Return ``(e_phoff, e_shoff)`` read back from *image*."""
    prefix = "<" if byte_order == "little" else ">"
    return struct.unpack_from(prefix + "QQ", image, 32)

"""
ELF Constants
==============

Numeric constants from the System V ABI ``<elf.h>`` definitions that the
rdelf decoders understand, together with the display names each decoder
reports for them.  Values missing from a ``*_NAMES`` table decode to
``UNKNOWN`` rather than raising.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
    - System V Application Binary Interface, Edition 4.1.
    - Linux man page: elf(5).
"""

from __future__ import annotations


UNKNOWN: str = "Unknown"

# ---------------------------------------------------------------------------
# Identification block (e_ident)
# ---------------------------------------------------------------------------

ELF_MAGIC: bytes = b"\x7fELF"
EI_NIDENT: int = 16

EI_CLASS: int = 4
EI_DATA: int = 5
EI_VERSION: int = 6
EI_OSABI: int = 7

# ELF class
ELFCLASSNONE: int = 0
ELFCLASS32: int = 1
ELFCLASS64: int = 2
ELFCLASSNUM: int = 3

CLASS_NAMES: dict[int, str] = {
    ELFCLASSNONE: "None",
    ELFCLASS32: "ELF32",
    ELFCLASS64: "ELF64",
    ELFCLASSNUM: "Num",
}

# Data encoding
ELFDATA2LSB: int = 1  # Little-endian
ELFDATA2MSB: int = 2  # Big-endian

DATA_NAMES: dict[int, str] = {
    ELFDATA2LSB: "little endian",
    ELFDATA2MSB: "big endian",
}
DATA_UNKNOWN: str = "unknown"

# ---------------------------------------------------------------------------
# ELF header (Elf64_Ehdr)
# ---------------------------------------------------------------------------

ELF64_EHDR_SIZE: int = 64

# Object file type
ET_NONE: int = 0
ET_REL: int = 1
ET_EXEC: int = 2
ET_DYN: int = 3
ET_CORE: int = 4

TYPE_NAMES: dict[int, str] = {
    ET_NONE: "An unknown type",
    ET_REL: "A relocatable file",
    ET_EXEC: "An executable file",
    ET_DYN: "A shared object",
    ET_CORE: "A core file",
}

# Machine architectures
EM_NONE: int = 0
EM_SPARC: int = 2
EM_386: int = 3
EM_SPARC32PLUS: int = 18
EM_SPARCV9: int = 43
EM_X86_64: int = 62

MACHINE_NAMES: dict[int, str] = {
    EM_NONE: "An unknown machine",
    EM_SPARC: "Sun Microsystems SPARC",
    EM_386: "Intel 80386",
    EM_SPARC32PLUS: "SPARC with enhanced instruction set",
    EM_SPARCV9: "SPARC v9 64-bit",
    EM_X86_64: "AMD x86-64",
}

# ---------------------------------------------------------------------------
# Program headers (Elf64_Phdr)
# ---------------------------------------------------------------------------

ELF64_PHDR_SIZE: int = 56

PT_NULL: int = 0
PT_LOAD: int = 1
PT_DYNAMIC: int = 2
PT_INTERP: int = 3
PT_NOTE: int = 4
PT_SHLIB: int = 5
PT_PHDR: int = 6
PT_TLS: int = 7
PT_NUM: int = 8
PT_GNU_EH_FRAME: int = 0x6474E550
PT_GNU_STACK: int = 0x6474E551
PT_GNU_RELRO: int = 0x6474E552

SEGMENT_TYPE_NAMES: dict[int, str] = {
    PT_NULL: "NULL",
    PT_LOAD: "LOAD",
    PT_DYNAMIC: "DYNAMIC",
    PT_INTERP: "INTERP",
    PT_NOTE: "NOTE",
    PT_SHLIB: "SHLIB",
    PT_PHDR: "PHDR",
    PT_TLS: "TLS",
    PT_NUM: "NUM",
    PT_GNU_EH_FRAME: "GNU_EH_FRAME",
    PT_GNU_STACK: "GNU_STACK",
    PT_GNU_RELRO: "GNU_RELRO",
}

PF_X: int = 0x1  # Execute
PF_W: int = 0x2  # Write
PF_R: int = 0x4  # Read

# Column order of the rendered segment flag string
SEGMENT_FLAG_COLUMNS: tuple[tuple[int, str], ...] = (
    (PF_R, "Readable"),
    (PF_W, "Writable"),
    (PF_X, "Executable"),
)

# ---------------------------------------------------------------------------
# Section headers (Elf64_Shdr)
# ---------------------------------------------------------------------------

ELF64_SHDR_SIZE: int = 64

SHN_UNDEF: int = 0

SHT_NULL: int = 0
SHT_PROGBITS: int = 1
SHT_SYMTAB: int = 2
SHT_STRTAB: int = 3
SHT_RELA: int = 4
SHT_HASH: int = 5
SHT_DYNAMIC: int = 6
SHT_NOTE: int = 7
SHT_NOBITS: int = 8
SHT_REL: int = 9
SHT_SHLIB: int = 10
SHT_DYNSYM: int = 11
SHT_INIT_ARRAY: int = 14
SHT_FINI_ARRAY: int = 15
SHT_PREINIT_ARRAY: int = 16
SHT_GROUP: int = 17
SHT_SYMTAB_SHNDX: int = 18
SHT_NUM: int = 19
SHT_GNU_HASH: int = 0x6FFFFFF6
SHT_GNU_VERNEED: int = 0x6FFFFFFE
SHT_GNU_VERSYM: int = 0x6FFFFFFF

SECTION_TYPE_NAMES: dict[int, str] = {
    SHT_NULL: "NULL",
    SHT_PROGBITS: "PROGBITS",
    SHT_SYMTAB: "SYMTAB",
    SHT_STRTAB: "STRTAB",
    SHT_RELA: "RELA",
    SHT_HASH: "HASH",
    SHT_DYNAMIC: "DYNAMIC",
    SHT_NOTE: "NOTE",
    SHT_NOBITS: "NOBITS",
    SHT_REL: "REL",
    SHT_SHLIB: "SHLIB",
    SHT_DYNSYM: "DYNSYM",
    SHT_INIT_ARRAY: "INIT_ARRAY",
    SHT_FINI_ARRAY: "FINI_ARRAY",
    SHT_PREINIT_ARRAY: "PREINIT_ARRAY",
    SHT_GROUP: "GROUP",
    SHT_SYMTAB_SHNDX: "SYMTAB_SHNDX",
    SHT_NUM: "NUM",
    SHT_GNU_HASH: "GNU_HASH",
    SHT_GNU_VERNEED: "GNU_VERNEED",
    SHT_GNU_VERSYM: "GNU_VERSYM",
}

SHF_WRITE: int = 1 << 0
SHF_ALLOC: int = 1 << 1
SHF_EXECINSTR: int = 1 << 2
SHF_MERGE: int = 1 << 4
SHF_STRINGS: int = 1 << 5
SHF_INFO_LINK: int = 1 << 6
SHF_LINK_ORDER: int = 1 << 7
SHF_OS_NONCONFORMING: int = 1 << 8
SHF_GROUP: int = 1 << 9
SHF_TLS: int = 1 << 10
SHF_COMPRESSED: int = 1 << 11
SHF_EXCLUDE: int = 1 << 31

# Column order of the rendered section flag string.  EXCLUDE precedes
# COMPRESSED even though its bit is higher.
SECTION_FLAG_COLUMNS: tuple[tuple[int, str], ...] = (
    (SHF_WRITE, "W"),
    (SHF_ALLOC, "A"),
    (SHF_EXECINSTR, "X"),
    (SHF_MERGE, "M"),
    (SHF_STRINGS, "S"),
    (SHF_INFO_LINK, "I"),
    (SHF_LINK_ORDER, "L"),
    (SHF_OS_NONCONFORMING, "O"),
    (SHF_GROUP, "G"),
    (SHF_TLS, "T"),
    (SHF_EXCLUDE, "E"),
    (SHF_COMPRESSED, "C"),
)

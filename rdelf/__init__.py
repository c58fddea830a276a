"""
rdelf -- ELF64 Header Reader
=============================

rdelf decodes the header structures of 64-bit ELF files and prints a
human-readable summary of them:

    - Identification block (magic, class, data encoding, version)
    - ELF header (type, machine, entry point, table locations)
    - Program headers / segments (type, R/W/X flags, offsets, sizes)
    - Section headers (name, type, flag letters, addresses, sizes)

The byte order of every multi-byte field is taken from the file's own
identification block, so little- and big-endian files decode alike.

References:
    - TIS Committee. (1995). ELF Specification, Version 1.2.
    - System V Application Binary Interface, Edition 4.1.
"""

__version__ = "0.1.0"

from rdelf.core.engine import ReadelfEngine
from rdelf.core.models import ElfReport
from rdelf.parsers.elf_parser import ElfParser

__all__ = [
    "__version__",
    "ReadelfEngine",
    "ElfReport",
    "ElfParser",
]

"""
rdelf Parsers
=============

Decoders for the ELF64 identification block, file header, program header
table and section header table.
"""

from rdelf.core.errors import ElfError, ElfFormatError, ElfTruncationError
from rdelf.parsers.elf_parser import ElfParser
from rdelf.parsers.header import decode_elf_header
from rdelf.parsers.ident import decode_ident, resolve_byte_order
from rdelf.parsers.program_headers import (
    decode_program_headers,
    decode_program_headers_at,
    segment_flags_str,
)
from rdelf.parsers.section_headers import (
    decode_section_headers,
    decode_section_headers_at,
    resolve_section_names,
    section_flags_str,
)

__all__ = [
    "ElfError",
    "ElfFormatError",
    "ElfTruncationError",
    "ElfParser",
    "decode_ident",
    "resolve_byte_order",
    "decode_elf_header",
    "decode_program_headers",
    "decode_program_headers_at",
    "segment_flags_str",
    "decode_section_headers",
    "decode_section_headers_at",
    "resolve_section_names",
    "section_flags_str",
]

"""
ELF64 Header Parser
====================

:class:`ElfParser` ties the four decoders together for one in-memory
file.  The identification block and ELF header are decoded once and
cached; both table decoders receive that cached header, so byte order is
resolved a single time per file.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
    - Linux man page: elf(5).
"""

from __future__ import annotations

from typing import Optional

from rdelf.core.models import (
    ElfHeaderInfo,
    ElfIdent,
    ProgramHeaderInfo,
    SectionHeaderInfo,
)
from rdelf.parsers.header import decode_elf_header
from rdelf.parsers.ident import decode_ident
from rdelf.parsers.program_headers import decode_program_headers
from rdelf.parsers.reader import Buffer
from rdelf.parsers.section_headers import decode_section_headers


class ElfParser:
    """Lazy, caching decoder for a single ELF64 file held in memory.

    Usage::

        parser = ElfParser(raw_bytes)
        header = parser.header
        segments = parser.get_program_headers()
        sections = parser.get_section_headers()

    Every accessor raises :class:`~rdelf.core.errors.ElfFormatError` (or
    its subclass ``ElfTruncationError``) when its structure cannot be
    decoded.  Failures are not cached, so a retry raises again.
    """

    def __init__(
        self,
        data: Buffer,
        *,
        strict_encoding: bool = False,
        resolve_names: bool = True,
    ) -> None:
        """Initialise the parser.

        Args:
            data: Complete ELF file contents.
            strict_encoding: Reject unrecognized data-encoding bytes.
            resolve_names: Resolve section names from ``e_shstrndx``.
        """
        self._data: Buffer = data
        self._strict_encoding = strict_encoding
        self._resolve_names = resolve_names
        self._ident: Optional[ElfIdent] = None
        self._header: Optional[ElfHeaderInfo] = None
        self._program_headers: Optional[list[ProgramHeaderInfo]] = None
        self._section_headers: Optional[list[SectionHeaderInfo]] = None

    @property
    def data(self) -> Buffer:
        """The buffer being decoded."""
        return self._data

    @property
    def ident(self) -> ElfIdent:
        """The decoded identification block."""
        if self._ident is None:
            self._ident = decode_ident(
                self._data, strict_encoding=self._strict_encoding
            )
        return self._ident

    @property
    def header(self) -> ElfHeaderInfo:
        """The decoded ELF header."""
        if self._header is None:
            self._header = decode_elf_header(self._data, self.ident)
        return self._header

    def get_program_headers(self) -> list[ProgramHeaderInfo]:
        """Return the program header table, decoding it on first use."""
        if self._program_headers is None:
            self._program_headers = decode_program_headers(
                self._data, self.header
            )
        return list(self._program_headers)

    def get_section_headers(self) -> list[SectionHeaderInfo]:
        """Return the section header table, decoding it on first use."""
        if self._section_headers is None:
            self._section_headers = decode_section_headers(
                self._data,
                self.header,
                resolve_names=self._resolve_names,
            )
        return list(self._section_headers)

"""
rdelf Console Output
=====================

Terminal rendering of an :class:`~rdelf.core.models.ElfReport`.

Two layouts are available:

* labeled lines (default) -- one ``Label: value`` line per field, the
  classic readelf-like dump;
* tables -- the same fields in Rich tables, one row per entry.

Addresses, offsets and sizes of table entries are printed in hex; counts
and indices in decimal.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from shared.console import RdelfConsole

from rdelf.core.models import (
    ElfHeaderInfo,
    ElfReport,
    ProgramHeaderInfo,
    SectionHeaderInfo,
)


def header_lines(header: ElfHeaderInfo) -> list[str]:
    """Labeled lines describing the identification block and ELF header."""
    ident = header.ident
    return [
        "Magic: " + " ".join(f"{b:x}" for b in ident.magic),
        f"Class: {ident.class_name}",
        f"Data: {ident.data}",
        f"Version: {ident.version:x}",
        f"Type: {header.type}",
        f"Machine: {header.machine}",
        f"EntryPoint: 0x{header.entry_point:x}",
        f"Start of Program headers: {header.ph_offset} (bytes)",
        f"Start of Section headers: {header.sh_offset} (bytes)",
        f"Number of Program headers: {header.ph_count}",
        f"Number of Section headers: {header.sh_count}",
        f"Section header string table index: {header.string_table_index}",
    ]


def program_header_lines(index: int, ph: ProgramHeaderInfo) -> list[str]:
    """Labeled lines describing one program header."""
    return [
        f"Program Headers[{index}]:",
        f"Type: {ph.type}",
        f"Flags: {ph.flags}",
        f"Offset: 0x{ph.offset:x}",
        f"VirtAddr: 0x{ph.vaddr:x}",
        f"PhysAddr: 0x{ph.paddr:x}",
        f"FileSize: 0x{ph.file_size:x}",
        f"MemSize: 0x{ph.mem_size:x}",
    ]


def section_header_lines(index: int, sh: SectionHeaderInfo) -> list[str]:
    """Labeled lines describing one section header."""
    return [
        f"Section Headers[{index}]:",
        f"Name: {sh.name}",
        f"Type: {sh.type}",
        f"Flags: {sh.flags}",
        f"Address: 0x{sh.address:x}",
        f"Offset: 0x{sh.offset:x}",
        f"Size: 0x{sh.size:x}",
        f"Link: {sh.link}",
        f"Info: {sh.info}",
        f"Alignment: 0x{sh.alignment:x}",
        f"Entry Size: 0x{sh.entry_size:x}",
    ]


class ReadelfConsoleOutput:
    """Renders ELF reports to the terminal.

    Usage::

        output = ReadelfConsoleOutput(table=True)
        output.display(report, show_header=True)
    """

    def __init__(
        self,
        console: RdelfConsole | None = None,
        *,
        table: bool = False,
    ) -> None:
        self._console: RdelfConsole = console or RdelfConsole()
        self._table = table

    def display(self, report: ElfReport, *, show_header: bool = True) -> None:
        """Render every part of *report* that was decoded.

        Args:
            report: Decoded report.
            show_header: Include the ELF header view.
        """
        if show_header:
            self.display_header(report.header)
        if report.program_headers is not None:
            self.display_program_headers(report.program_headers)
        if report.section_headers is not None:
            self.display_section_headers(report.section_headers)

    # ------------------------------------------------------------------ #
    #  ELF header
    # ------------------------------------------------------------------ #

    def display_header(self, header: ElfHeaderInfo) -> None:
        if not self._table:
            self._lines(header_lines(header))
            return

        panel = Panel(
            Text("\n".join(header_lines(header))),
            title="[bold bright_cyan]ELF Header[/bold bright_cyan]",
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.rich.print(panel)
        self._console.blank()

    # ------------------------------------------------------------------ #
    #  Program headers
    # ------------------------------------------------------------------ #

    def display_program_headers(self, headers: list[ProgramHeaderInfo]) -> None:
        if not self._table:
            for i, ph in enumerate(headers):
                self._lines(program_header_lines(i, ph))
            return

        self._console.table(
            "Program Headers",
            ["#", "Type", "Flags", "Offset", "VirtAddr", "PhysAddr",
             "FileSize", "MemSize", "Align"],
            [
                (
                    i, ph.type, ph.flags, f"0x{ph.offset:x}",
                    f"0x{ph.vaddr:x}", f"0x{ph.paddr:x}",
                    f"0x{ph.file_size:x}", f"0x{ph.mem_size:x}",
                    f"0x{ph.align:x}",
                )
                for i, ph in enumerate(headers)
            ],
            justify=["right", "left", "left"] + ["right"] * 6,
            caption=f"{len(headers)} entries",
        )
        self._console.blank()

    # ------------------------------------------------------------------ #
    #  Section headers
    # ------------------------------------------------------------------ #

    def display_section_headers(self, headers: list[SectionHeaderInfo]) -> None:
        if not self._table:
            for i, sh in enumerate(headers):
                self._lines(section_header_lines(i, sh))
            return

        self._console.table(
            "Section Headers",
            ["#", "Name", "Type", "Flags", "Address", "Offset", "Size",
             "Link", "Info", "Align", "EntSize"],
            [
                (
                    i, sh.name or "<unnamed>", sh.type, sh.flags,
                    f"0x{sh.address:x}", f"0x{sh.offset:x}", f"0x{sh.size:x}",
                    sh.link, sh.info, f"0x{sh.alignment:x}",
                    f"0x{sh.entry_size:x}",
                )
                for i, sh in enumerate(headers)
            ],
            justify=["right", "left", "left", "left"] + ["right"] * 7,
            caption=f"{len(headers)} entries",
        )
        self._console.blank()

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _lines(self, lines: list[str]) -> None:
        """Print a block of labeled lines followed by a blank line."""
        for text in lines:
            self._console.line(text)
        self._console.line()

"""
rdelf Engine
=============

Runs the ELF decoding pipeline for one file:

    1. Check the file size against the configured limit
    2. Read the whole file into memory
    3. Decode the identification block and ELF header
    4. Decode the program header table (if requested)
    5. Decode the section header table (if requested)
    6. Collect non-fatal anomalies as report warnings

Decode failures are logged and re-raised unchanged; the engine never
returns a partially decoded report.
"""

from __future__ import annotations

from pathlib import Path

from shared.config import RdelfConfig
from shared.logger import RdelfLogger

from rdelf.core.errors import ElfError, ElfFormatError
from rdelf.core.models import ElfHeaderInfo, ElfReport
from rdelf.parsers.constants import (
    DATA_NAMES,
    ELF64_PHDR_SIZE,
    ELF64_SHDR_SIZE,
    ELFCLASS64,
)
from rdelf.parsers.elf_parser import ElfParser
from rdelf.parsers.reader import Buffer


class ReadelfEngine:
    """Reads ELF64 files and decodes their header structures.

    Usage::

        engine = ReadelfEngine()
        report = engine.analyze("/bin/ls", program_headers=True)
        print(report.header.machine)
    """

    def __init__(
        self,
        config: RdelfConfig | None = None,
        logger: RdelfLogger | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config: rdelf configuration.  Defaults are used if not provided.
            logger: Logger instance.  A new one is created if not provided.
        """
        self._config: RdelfConfig = config or RdelfConfig()
        self._logger: RdelfLogger = logger or RdelfLogger(
            "engine",
            log_level=self._config.global_settings.log_level,
        )

    # ------------------------------------------------------------------ #
    #  Entry points
    # ------------------------------------------------------------------ #

    def analyze(
        self,
        file_path: str | Path,
        *,
        program_headers: bool = False,
        section_headers: bool = False,
    ) -> ElfReport:
        """Read *file_path* and decode its ELF structures.

        Args:
            file_path: Path to the ELF file.
            program_headers: Also decode the program header table.
            section_headers: Also decode the section header table.

        Raises:
            OSError: If the file cannot be read.
            ElfFormatError: If the file exceeds ``readelf.max_file_size``
                or cannot be decoded.
        """
        path = Path(file_path)
        file_size = path.stat().st_size
        max_size = self._config.readelf.max_file_size
        if file_size > max_size:
            message = (
                f"File too large: {file_size:,} bytes (max: {max_size:,} bytes)"
            )
            self._logger.error(message)
            raise ElfFormatError(message)

        self._logger.info("Reading %s (%d bytes)", path, file_size)
        data = path.read_bytes()

        return self.analyze_data(
            data,
            file_path=str(path),
            program_headers=program_headers,
            section_headers=section_headers,
        )

    def analyze_data(
        self,
        data: Buffer,
        file_path: str = "<memory>",
        *,
        program_headers: bool = False,
        section_headers: bool = False,
    ) -> ElfReport:
        """Decode ELF structures from bytes already in memory."""
        settings = self._config.readelf
        parser = ElfParser(
            data,
            strict_encoding=settings.strict_data_encoding,
            resolve_names=settings.resolve_section_names,
        )

        try:
            with self._logger.timed(f"decode {file_path}"):
                with self._logger.operation("elf_header"):
                    header = parser.header
                report = ElfReport(path=file_path, size=len(data), header=header)
                report.warnings.extend(self._header_warnings(header))

                if program_headers:
                    with self._logger.operation("program_headers"):
                        self._logger.debug(
                            "Decoding %d program headers at %#x",
                            header.ph_count,
                            header.ph_offset,
                        )
                        report.program_headers = parser.get_program_headers()

                if section_headers:
                    with self._logger.operation("section_headers"):
                        self._logger.debug(
                            "Decoding %d section headers at %#x",
                            header.sh_count,
                            header.sh_offset,
                        )
                        report.section_headers = parser.get_section_headers()
        except ElfError as exc:
            self._logger.error("Decoding %s failed: %s", file_path, exc)
            raise

        for warning in report.warnings:
            self._logger.warning(warning)
        return report

    # ------------------------------------------------------------------ #
    #  Anomaly checks
    # ------------------------------------------------------------------ #

    @staticmethod
    def _header_warnings(header: ElfHeaderInfo) -> list[str]:
        """Describe header values that decode but look wrong."""
        ident = header.ident
        warnings: list[str] = []

        if not ident.has_elf_magic:
            warnings.append(
                f"Bad ELF magic {ident.magic[:4].hex(' ')}; decoding anyway"
            )
        if ident.ei_class != ELFCLASS64:
            warnings.append(
                f"Class is {ident.class_name}; decoded with the ELF64 layout"
            )
        if ident.ei_data not in DATA_NAMES:
            warnings.append(
                f"Unknown data encoding {ident.ei_data}; assuming big endian"
            )
        if header.ph_count and header.ph_entry_size < ELF64_PHDR_SIZE:
            warnings.append(
                f"Program header entry size {header.ph_entry_size} is smaller "
                f"than {ELF64_PHDR_SIZE}; entries overlap"
            )
        if header.sh_count and header.sh_entry_size < ELF64_SHDR_SIZE:
            warnings.append(
                f"Section header entry size {header.sh_entry_size} is smaller "
                f"than {ELF64_SHDR_SIZE}; entries overlap"
            )
        return warnings

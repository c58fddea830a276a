"""
rdelf Core Module
==================

Data models and error types shared by the decoders, the engine and the
output renderers.  The engine lives in :mod:`rdelf.core.engine`.
"""

from rdelf.core.errors import ElfError, ElfFormatError, ElfTruncationError
from rdelf.core.models import (
    ByteOrder,
    ElfHeaderInfo,
    ElfIdent,
    ElfReport,
    ProgramHeaderInfo,
    SectionHeaderInfo,
)

__all__ = [
    "ElfError",
    "ElfFormatError",
    "ElfTruncationError",
    "ByteOrder",
    "ElfHeaderInfo",
    "ElfIdent",
    "ElfReport",
    "ProgramHeaderInfo",
    "SectionHeaderInfo",
]

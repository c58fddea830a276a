"""
rdelf Error Types
==================

Every decode failure raised by :mod:`rdelf.parsers` derives from
:class:`ElfError`.  Unrecognized enumeration values are never errors; they
decode to an ``"Unknown"`` label instead.
"""

from __future__ import annotations

from typing import Any, Sequence


class ElfError(Exception):
    """Base class for all rdelf decode errors."""


class ElfFormatError(ElfError, ValueError):
    """The buffer cannot be decoded as an ELF64 file."""


class ElfTruncationError(ElfFormatError):
    """The buffer ends before a fixed-size structure does.

    Attributes:
        what:      Name of the structure being decoded.
        offset:    File offset the structure starts at.
        needed:    Number of bytes the structure occupies.
        available: Number of bytes present from *offset* to end of buffer.
        index:     Table entry index, or ``None`` outside table decodes.
        partial:   Entries decoded before the failing one (table decodes
                   only).  Diagnostic data: the decode itself failed.
    """

    def __init__(
        self,
        what: str,
        offset: int,
        needed: int,
        available: int,
        *,
        index: int | None = None,
        partial: Sequence[Any] = (),
    ) -> None:
        self.what = what
        self.offset = offset
        self.needed = needed
        self.available = max(available, 0)
        self.index = index
        self.partial = list(partial)
        label = what if index is None else f"{what}[{index}]"
        super().__init__(
            f"truncated {label}: need {needed} bytes at offset {offset:#x}, "
            f"{self.available} available"
        )

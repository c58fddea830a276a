"""
Bounds-checked struct decoding shared by all ELF decoders.

Every fixed-size ELF structure is decoded with :func:`unpack_at`, which
checks that the whole structure lies inside the buffer before calling
:func:`struct.unpack_from`.  This is the only place a truncated input is
detected, so all decoders report truncation the same way.
"""

from __future__ import annotations

import struct
from typing import Union

from rdelf.core.errors import ElfTruncationError
from rdelf.core.models import ByteOrder

Buffer = Union[bytes, bytearray, memoryview]


def unpack_at(
    fmt: str,
    data: Buffer,
    offset: int,
    byte_order: ByteOrder,
    what: str,
    *,
    index: int | None = None,
    partial: list | None = None,
) -> tuple[int, ...]:
    """Unpack *fmt* from *data* at *offset* using *byte_order*.

    Args:
        fmt: :mod:`struct` format without a byte-order prefix.
        data: Source buffer.
        offset: Absolute offset of the structure.
        byte_order: Order to decode multi-byte fields with.
        what: Structure name for error messages.
        index: Table entry index, forwarded to the error.
        partial: Entries decoded so far, forwarded to the error.

    Raises:
        ElfTruncationError: If ``offset + calcsize(fmt)`` exceeds the buffer.
    """
    layout = struct.Struct(byte_order.struct_prefix + fmt)
    available = len(data) - offset
    if offset < 0 or layout.size > available:
        raise ElfTruncationError(
            what,
            offset,
            layout.size,
            available,
            index=index,
            partial=partial or (),
        )
    return layout.unpack_from(data, offset)


def read_cstring(data: Buffer, offset: int) -> str:
    """Read a NUL-terminated string from *data* starting at *offset*.

    Returns ``""`` when *offset* lies outside *data*.  A missing
    terminator ends the string at the end of the buffer.
    """
    if offset < 0 or offset >= len(data):
        return ""
    raw = bytes(data[offset:])
    end = raw.find(b"\x00")
    if end != -1:
        raw = raw[:end]
    return raw.decode("ascii", errors="replace")

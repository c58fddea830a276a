"""
ELF Identification Decoder
===========================

Decodes the 16-byte ``e_ident`` block at the start of every ELF file and
resolves the byte order that every later structure is decoded with.

Layout::

    0..3   magic  (7f 45 4c 46)
    4      class  (1 = ELF32, 2 = ELF64)
    5      data   (1 = little-endian, 2 = big-endian)
    6      version
    7      OS/ABI
    8..15  padding

The block consists of single bytes, so it is read the same way whatever
order the file declares.
"""

from __future__ import annotations

from rdelf.core.errors import ElfFormatError
from rdelf.core.models import ByteOrder, ElfIdent
from rdelf.parsers.constants import (
    CLASS_NAMES,
    DATA_NAMES,
    DATA_UNKNOWN,
    EI_CLASS,
    EI_DATA,
    EI_NIDENT,
    EI_OSABI,
    EI_VERSION,
    ELFDATA2LSB,
    ELFDATA2MSB,
    UNKNOWN,
)
from rdelf.parsers.reader import Buffer, unpack_at


def resolve_byte_order(ei_data: int) -> ByteOrder:
    """Map the data-encoding byte to a byte order.

    Only ``ELFDATA2LSB`` selects little-endian.  Every other value,
    ``ELFDATA2MSB`` and unrecognized encodings alike, selects big-endian.
    """
    return ByteOrder.LITTLE if ei_data == ELFDATA2LSB else ByteOrder.BIG


def decode_ident(data: Buffer, *, strict_encoding: bool = False) -> ElfIdent:
    """Decode the identification block at the start of *data*.

    Args:
        data: Whole-file buffer; at least 16 bytes.
        strict_encoding: Reject data-encoding bytes other than 1 and 2
            instead of falling back to big-endian.

    Returns:
        The decoded :class:`ElfIdent`.

    Raises:
        ElfTruncationError: If *data* is shorter than 16 bytes.
        ElfFormatError: If *strict_encoding* is set and the encoding byte
            is unrecognized.
    """
    (magic,) = unpack_at(
        f"{EI_NIDENT}s", data, 0, ByteOrder.BIG, "identification block"
    )

    ei_class = magic[EI_CLASS]
    ei_data = magic[EI_DATA]
    if strict_encoding and ei_data not in (ELFDATA2LSB, ELFDATA2MSB):
        raise ElfFormatError(
            f"unrecognized data encoding {ei_data:#04x} in e_ident[{EI_DATA}]"
        )

    return ElfIdent(
        magic=magic,
        ei_class=ei_class,
        class_name=CLASS_NAMES.get(ei_class, UNKNOWN),
        ei_data=ei_data,
        data=DATA_NAMES.get(ei_data, DATA_UNKNOWN),
        version=magic[EI_VERSION],
        os_abi=magic[EI_OSABI],
        byte_order=resolve_byte_order(ei_data),
    )

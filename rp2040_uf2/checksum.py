# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Boot stage 2 checksum injection.

The RP2040 boot ROM copies the first 256 bytes of flash into SRAM, computes
a CRC-32/MPEG-2 over bytes 0..251 and compares it with the little-endian
word at offset 252.  On mismatch the ROM falls back to BOOTSEL mode.
"""

import struct

from .buffers import as_bytes
from .crc import crc32
from .errors import MalformedBootloader
from .layout import BOOT2_SIZE, CHECKSUM_OFFSET, CHECKSUM_WIDTH

_CHECKSUM = struct.Struct("<I")


def _require_full_size(image: bytes) -> None:
    expected = CHECKSUM_OFFSET + CHECKSUM_WIDTH
    if len(image) != expected:
        raise MalformedBootloader(
            f"boot2 image must be exactly {expected} bytes, got {len(image)}"
        )


def pad_bootloader(raw) -> bytes:
    """Zero-pad a raw boot2 binary to BOOT2_SIZE bytes.

    Binaries of up to 252 bytes leave the checksum field as zeros; anything
    already in bytes 252..255 is a placeholder and will be overwritten by
    :func:`inject_checksum`.
    """
    raw = as_bytes(raw, "bootloader")
    if len(raw) > BOOT2_SIZE:
        raise MalformedBootloader(
            f"boot2 image is {len(raw)} bytes, must not exceed {BOOT2_SIZE}"
        )
    return raw.ljust(BOOT2_SIZE, b"\x00")


def inject_checksum(bootloader) -> bytes:
    """Return a copy of *bootloader* with the boot ROM CRC written in place.

    The input must already be padded to its full size.  Only the checksum
    field differs between input and output.
    """
    image = as_bytes(bootloader, "bootloader")
    _require_full_size(image)

    crc = crc32(image[:CHECKSUM_OFFSET])
    patched = bytearray(image)
    _CHECKSUM.pack_into(patched, CHECKSUM_OFFSET, crc)
    return bytes(patched)


def read_checksum(bootloader) -> int:
    """Return the value stored in the checksum field."""
    image = as_bytes(bootloader, "bootloader")
    _require_full_size(image)
    return _CHECKSUM.unpack_from(image, CHECKSUM_OFFSET)[0]


def checksum_valid(bootloader) -> bool:
    """Check whether the stored checksum matches the image contents."""
    image = as_bytes(bootloader, "bootloader")
    return read_checksum(image) == crc32(image[:CHECKSUM_OFFSET])

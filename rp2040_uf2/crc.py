# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""CRC-32/MPEG-2, the variant the RP2040 boot ROM uses to validate boot2.

MSB-first, no reflection, init 0xFFFFFFFF, no final XOR.
"""

from .layout import CRC_INIT, CRC_POLY, CRC_XOROUT


def _make_table():
    table = []
    for i in range(256):
        crc = i << 24
        for _ in range(8):
            if crc & 0x8000_0000:
                crc = ((crc << 1) ^ CRC_POLY) & 0xFFFF_FFFF
            else:
                crc = (crc << 1) & 0xFFFF_FFFF
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()


def crc32_update(crc: int, data) -> int:
    """Feed *data* into a running (un-finalized) CRC register."""
    for byte in data:
        crc = ((crc << 8) & 0xFFFF_FFFF) ^ _TABLE[((crc >> 24) ^ byte) & 0xFF]
    return crc


def crc32(data) -> int:
    """Return the CRC-32/MPEG-2 of *data*."""
    return crc32_update(CRC_INIT, data) ^ CRC_XOROUT

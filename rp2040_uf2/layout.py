# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Binary layout constants for RP2040 UF2 images.

Values follow the UF2 format (https://github.com/microsoft/uf2) and the
RP2040 boot ROM's stage-2 validation routine.  They describe an external
contract and must not be changed.
"""

# UF2 block framing
UF2_MAGIC_START0 = 0x0A324655  # "UF2\n"
UF2_MAGIC_START1 = 0x9E5D5157
UF2_MAGIC_END = 0x0AB16F30
UF2_FLAG_FAMILY_ID = 0x00002000

BLOCK_SIZE = 512
HEADER_SIZE = 32
DATA_REGION_SIZE = BLOCK_SIZE - HEADER_SIZE - 4  # 476

RP2040_FAMILY_ID = 0xE48BFF56

# Flash layout
FLASH_BASE = 0x1000_0000
PAGE_SIZE = 256

# Boot stage 2: 252 bytes of code followed by a little-endian CRC
BOOT2_SIZE = 256
CHECKSUM_OFFSET = 252
CHECKSUM_WIDTH = 4
PROGRAM_BASE = FLASH_BASE + BOOT2_SIZE

# CRC-32/MPEG-2, as checked by the boot ROM
CRC_POLY = 0x04C11DB7
CRC_INIT = 0xFFFF_FFFF
CRC_XOROUT = 0x0000_0000

U32_MAX = 0xFFFF_FFFF

# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Build UF2 images for the RP2040 from a boot2 binary and a program binary."""

from .block import Uf2Block, iter_blocks, serialize
from .checksum import checksum_valid, inject_checksum, pad_bootloader, read_checksum
from .crc import crc32
from .encoder import block_count, build_uf2, encode
from .errors import InvalidConfiguration, MalformedBootloader, PayloadTooLarge, Uf2Error

__version__ = "0.1.0"

__all__ = [
    "InvalidConfiguration",
    "MalformedBootloader",
    "PayloadTooLarge",
    "Uf2Block",
    "Uf2Error",
    "block_count",
    "build_uf2",
    "checksum_valid",
    "crc32",
    "encode",
    "inject_checksum",
    "iter_blocks",
    "pad_bootloader",
    "read_checksum",
    "serialize",
]

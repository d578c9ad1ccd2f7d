# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Split flash images into UF2 blocks.

:func:`encode` handles one contiguous address region.  :func:`build_uf2`
drives two regions, boot2 and the program, sharing a single block counter
so every block of the output reports the same total.
"""

from collections.abc import Iterator

from .block import Uf2Block
from .buffers import as_bytes
from .checksum import inject_checksum, pad_bootloader
from .errors import InvalidConfiguration, PayloadTooLarge
from .layout import (
    BOOT2_SIZE,
    DATA_REGION_SIZE,
    FLASH_BASE,
    PAGE_SIZE,
    PROGRAM_BASE,
    RP2040_FAMILY_ID,
    U32_MAX,
)


def _check_u32(name: str, value: int) -> None:
    if not 0 <= value <= U32_MAX:
        raise InvalidConfiguration(f"{name} 0x{value:X} is not a 32-bit value")


def _check_chunk_size(chunk_size: int) -> None:
    if not 0 < chunk_size <= DATA_REGION_SIZE:
        raise InvalidConfiguration(
            f"chunk size {chunk_size} must be between 1 and {DATA_REGION_SIZE}"
        )


def block_count(length: int, chunk_size: int = PAGE_SIZE) -> int:
    """Number of blocks needed to carry *length* bytes."""
    _check_chunk_size(chunk_size)
    if length < 0:
        raise InvalidConfiguration(f"payload length {length} is negative")
    count = (length + chunk_size - 1) // chunk_size
    if count > U32_MAX:
        raise PayloadTooLarge(
            f"{length} bytes need {count} blocks, more than a 32-bit count allows"
        )
    return count


def encode(
    payload,
    base_address: int,
    family_id: int,
    *,
    start_index: int = 0,
    total_blocks=None,
    chunk_size: int = PAGE_SIZE,
    full_pages: bool = False,
    emit_empty_block: bool = False,
) -> Iterator[Uf2Block]:
    """Encode *payload* as UF2 blocks mapped from *base_address* upward.

    Block ``i`` carries ``payload[i*chunk_size:(i+1)*chunk_size]`` at
    ``base_address + i*chunk_size`` and is numbered ``start_index + i``.
    ``total_blocks`` defaults to the number of blocks this call emits
    (plus ``start_index``); pass it explicitly when several regions share
    one stream.

    With ``full_pages`` the last block is zero-padded and declared as a full
    ``chunk_size`` payload, which the RP2040 boot ROM requires.  An empty
    payload yields no blocks unless ``emit_empty_block`` is set, in which
    case a single zero-length block is produced.

    All arguments are validated before the first block is yielded.
    """
    payload = as_bytes(payload, "payload")
    _check_chunk_size(chunk_size)
    _check_u32("base address", base_address)
    _check_u32("family ID", family_id)
    if start_index < 0:
        raise InvalidConfiguration(f"start index {start_index} is negative")

    count = block_count(len(payload), chunk_size)
    if count == 0 and emit_empty_block:
        count = 1

    if total_blocks is None:
        total_blocks = start_index + count
    if start_index + count > total_blocks:
        raise InvalidConfiguration(
            f"blocks {start_index}..{start_index + count - 1} "
            f"do not fit in a total of {total_blocks}"
        )
    if total_blocks > U32_MAX:
        raise PayloadTooLarge(f"total block count {total_blocks} exceeds 32 bits")
    if count and base_address + (count - 1) * chunk_size > U32_MAX:
        raise PayloadTooLarge(
            f"{len(payload)} bytes from 0x{base_address:08X} run past the 32-bit "
            "address space"
        )

    return _blocks(
        payload, base_address, family_id, start_index, total_blocks,
        chunk_size, full_pages, count,
    )


def _blocks(payload, base_address, family_id, start_index, total_blocks,
            chunk_size, full_pages, count):
    for i in range(count):
        offset = i * chunk_size
        chunk = payload[offset : offset + chunk_size]
        if full_pages:
            chunk = chunk.ljust(chunk_size, b"\x00")
        yield Uf2Block(
            target_address=base_address + offset,
            block_no=start_index + i,
            num_blocks=total_blocks,
            family_id=family_id,
            data=chunk,
        )


def build_uf2(
    bootloader,
    program,
    *,
    family_id: int = RP2040_FAMILY_ID,
    full_pages: bool = False,
) -> "list[Uf2Block]":
    """Build the block list for a boot2 image followed by a program.

    The raw boot2 binary is zero-padded to BOOT2_SIZE and checksummed, then
    placed at FLASH_BASE.  The program follows at PROGRAM_BASE.  Both
    regions are encoded separately with a shared, continuing block index.
    """
    boot2 = inject_checksum(pad_bootloader(bootloader))
    program = as_bytes(program, "program")

    boot2_blocks = block_count(BOOT2_SIZE)
    total = boot2_blocks + block_count(len(program))

    blocks = list(
        encode(
            boot2, FLASH_BASE, family_id,
            total_blocks=total, full_pages=full_pages,
        )
    )
    blocks.extend(
        encode(
            program, PROGRAM_BASE, family_id,
            start_index=boot2_blocks, total_blocks=total, full_pages=full_pages,
        )
    )
    return blocks

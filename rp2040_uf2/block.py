# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""UF2 block record.

Each block is 512 bytes: eight little-endian u32 header words, a 476-byte
data region and a trailing magic word.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from struct import Struct

from .errors import InvalidConfiguration
from .layout import (
    BLOCK_SIZE,
    DATA_REGION_SIZE,
    U32_MAX,
    UF2_FLAG_FAMILY_ID,
    UF2_MAGIC_END,
    UF2_MAGIC_START0,
    UF2_MAGIC_START1,
)

def _check_layout(record: Struct) -> Struct:
    if record.size != BLOCK_SIZE:
        raise InvalidConfiguration(
            f"UF2 record layout is {record.size} bytes, expected {BLOCK_SIZE}"
        )
    return record


_BLOCK = _check_layout(Struct(f"<8I{DATA_REGION_SIZE}sI"))


@dataclass(frozen=True)
class Uf2Block:
    target_address: int
    block_no: int
    num_blocks: int
    family_id: int
    data: bytes
    payload_size: int = None
    flags: int = UF2_FLAG_FAMILY_ID

    def __post_init__(self):
        # payload_size defaults to the length of the data actually carried
        if self.payload_size is None:
            object.__setattr__(self, "payload_size", len(self.data))
        for name in (
            "flags", "target_address", "payload_size",
            "block_no", "num_blocks", "family_id",
        ):
            value = getattr(self, name)
            if not 0 <= value <= U32_MAX:
                raise ValueError(f"{name} {value} is not a 32-bit value")
        if self.block_no >= self.num_blocks:
            raise ValueError(
                f"block number {self.block_no} is not below the block count "
                f"{self.num_blocks}"
            )
        if len(self.data) > DATA_REGION_SIZE:
            raise ValueError(
                f"block data is {len(self.data)} bytes, "
                f"data region holds {DATA_REGION_SIZE}"
            )
        if self.payload_size > DATA_REGION_SIZE:
            raise ValueError(f"payload size {self.payload_size} exceeds data region")

    @property
    def payload(self) -> bytes:
        """The bytes this block writes to flash."""
        return self.data[: self.payload_size].ljust(self.payload_size, b"\x00")

    def to_bytes(self) -> bytes:
        """Serialize into a 512-byte record, zero-filling the data region."""
        return _BLOCK.pack(
            UF2_MAGIC_START0,
            UF2_MAGIC_START1,
            self.flags,
            self.target_address,
            self.payload_size,
            self.block_no,
            self.num_blocks,
            self.family_id,
            self.data,
            UF2_MAGIC_END,
        )

    @classmethod
    def from_bytes(cls, raw) -> "Uf2Block":
        """Parse a single 512-byte record."""
        if len(raw) != BLOCK_SIZE:
            raise ValueError(f"Invalid block size: {len(raw)}")
        (
            magic_start0,
            magic_start1,
            flags,
            target_address,
            payload_size,
            block_no,
            num_blocks,
            family_id,
            data,
            magic_end,
        ) = _BLOCK.unpack(bytes(raw))

        if magic_start0 != UF2_MAGIC_START0 or magic_start1 != UF2_MAGIC_START1:
            raise ValueError(
                f"Invalid UF2 magic: 0x{magic_start0:08X} 0x{magic_start1:08X}"
            )
        if magic_end != UF2_MAGIC_END:
            raise ValueError(f"Invalid final magic: 0x{magic_end:08X}")

        return cls(
            target_address=target_address,
            block_no=block_no,
            num_blocks=num_blocks,
            family_id=family_id,
            data=data,
            payload_size=payload_size,
            flags=flags,
        )


def iter_blocks(raw) -> Iterator[Uf2Block]:
    """Iterate over the blocks of a UF2 byte stream."""
    if len(raw) % BLOCK_SIZE:
        raise ValueError(f"UF2 stream size {len(raw)} is not a multiple of {BLOCK_SIZE}")
    for offset in range(0, len(raw), BLOCK_SIZE):
        yield Uf2Block.from_bytes(raw[offset : offset + BLOCK_SIZE])


def serialize(blocks: Iterable[Uf2Block]) -> bytes:
    """Concatenate serialized blocks in the order given."""
    return b"".join(block.to_bytes() for block in blocks)

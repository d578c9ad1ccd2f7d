# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared fixtures and helpers for the rp2040_uf2 test suite."""

import random

import pytest

from rp2040_uf2 import iter_blocks, serialize


def reassemble(blocks) -> bytes:
    """Concatenate each block's declared payload in block-index order."""
    ordered = sorted(blocks, key=lambda b: b.block_no)
    return b"".join(b.payload for b in ordered)


def decode_stream(raw: bytes) -> bytes:
    """Parse a serialized UF2 stream back into its payload bytes."""
    return reassemble(iter_blocks(raw))


def roundtrip(blocks) -> bytes:
    """Serialize *blocks*, parse them again and reassemble the payload."""
    return decode_stream(serialize(blocks))


@pytest.fixture
def rng():
    """Deterministic random source so failures are reproducible."""
    return random.Random(0x2040)


@pytest.fixture
def boot2_raw(rng):
    """A 252-byte stand-in for a compiled boot2 binary."""
    return bytes(rng.getrandbits(8) for _ in range(252))


@pytest.fixture
def program():
    """A short program image that does not end on a page boundary."""
    return bytes(range(256)) * 3 + b"\xDE\xAD\xBE\xEF"

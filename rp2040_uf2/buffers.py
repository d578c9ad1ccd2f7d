# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Input normalization shared by the checksum and encoder stages."""


def as_bytes(data, what: str) -> bytes:
    """Copy a bytes-like *data* into an immutable ``bytes`` object.

    ``bytes(int)`` would silently produce that many zeros, so anything that
    is not a buffer is rejected with ``TypeError``.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes-like, got {type(data).__name__}")
    return bytes(data)

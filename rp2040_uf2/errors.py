# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Exceptions raised by the UF2 core."""


class Uf2Error(Exception):
    """Base class for all errors raised while building a UF2 image."""


class MalformedBootloader(Uf2Error, ValueError):
    """The boot2 image cannot hold the checksum field."""


class PayloadTooLarge(Uf2Error, ValueError):
    """A block count or target address does not fit in 32 bits."""


class InvalidConfiguration(Uf2Error, ValueError):
    """Encoder parameters are inconsistent with the UF2 block layout."""

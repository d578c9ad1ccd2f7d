# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Command-line entry point.

Usage:
    rp2040-uf2 --bootrom boot2.bin --progdata app.bin --output app.uf2

Environment variables (used as defaults when CLI options are not provided):
    RP2040_UF2_EXACT_PAYLOAD   Set to "1" to declare exact payload lengths
"""

import argparse
import os
import sys
from pathlib import Path

from . import __version__
from .block import serialize
from .encoder import build_uf2
from .errors import Uf2Error


def _env_bool(name: str) -> bool:
    """Read an environment variable as a boolean (truthy: '1', 'true', 'yes')."""
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rp2040-uf2",
        description="Generate a UF2 file which can be flashed to an RP2040.",
    )
    parser.add_argument(
        "-b", "--bootrom", required=True, type=Path,
        help="Boot stage 2 binary, at most 252 bytes of code",
    )
    parser.add_argument(
        "-p", "--progdata", required=True, type=Path,
        help="Program binary, placed in flash right after boot2",
    )
    parser.add_argument(
        "-o", "--output", required=True, type=Path,
        help="Output UF2 file",
    )
    parser.add_argument(
        "--exact-payload",
        action="store_true",
        default=_env_bool("RP2040_UF2_EXACT_PAYLOAD"),
        help="Declare the real length of each region's last block instead of "
             "a full 256-byte page (env: RP2040_UF2_EXACT_PAYLOAD=1)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        bootrom = args.bootrom.read_bytes()
        progdata = args.progdata.read_bytes()
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        blocks = build_uf2(bootrom, progdata, full_pages=not args.exact_payload)
    except Uf2Error as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    data = serialize(blocks)
    try:
        args.output.write_bytes(data)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"UF2: {args.output} ({len(blocks)} blocks, {len(data)} bytes)")
    return 0

# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
End-to-end tests for the rp2040-uf2 command.

Usage:
    python -m pytest tests/test_cli.py -v
"""

import struct

import pytest

from rp2040_uf2 import __version__, checksum_valid, iter_blocks
from rp2040_uf2.cli import main
from rp2040_uf2.layout import BLOCK_SIZE, FLASH_BASE, PROGRAM_BASE

pytestmark = pytest.mark.cli


@pytest.fixture
def inputs(tmp_path, boot2_raw, program):
    """Write boot2 and program binaries to disk and return their paths."""
    bootrom = tmp_path / "boot2.bin"
    progdata = tmp_path / "app.bin"
    bootrom.write_bytes(boot2_raw)
    progdata.write_bytes(program)
    return bootrom, progdata, tmp_path / "app.uf2"


def _run(bootrom, progdata, output, *extra):
    return main(["-b", str(bootrom), "-p", str(progdata), "-o", str(output), *extra])


class TestCli:
    def test_writes_uf2(self, inputs, program, capsys):
        bootrom, progdata, output = inputs
        assert _run(bootrom, progdata, output) == 0

        raw = output.read_bytes()
        assert len(raw) % BLOCK_SIZE == 0
        blocks = list(iter_blocks(raw))
        assert len(blocks) == 1 + 4
        assert blocks[0].target_address == FLASH_BASE
        assert blocks[1].target_address == PROGRAM_BASE
        assert checksum_valid(blocks[0].payload)

        out = capsys.readouterr().out
        assert f"UF2: {output} (5 blocks, {len(raw)} bytes)" in out

    def test_full_pages_by_default(self, inputs):
        bootrom, progdata, output = inputs
        assert _run(bootrom, progdata, output) == 0
        raw = output.read_bytes()
        last_payload_size = struct.unpack_from("<I", raw, len(raw) - BLOCK_SIZE + 16)[0]
        assert last_payload_size == 256

    def test_exact_payload_flag(self, inputs, program):
        bootrom, progdata, output = inputs
        assert _run(bootrom, progdata, output, "--exact-payload") == 0
        blocks = list(iter_blocks(output.read_bytes()))
        assert blocks[-1].payload_size == len(program) % 256
        assert b"".join(b.payload for b in blocks[1:]) == program

    def test_exact_payload_from_env(self, inputs, program, monkeypatch):
        monkeypatch.setenv("RP2040_UF2_EXACT_PAYLOAD", "yes")
        bootrom, progdata, output = inputs
        assert _run(bootrom, progdata, output) == 0
        blocks = list(iter_blocks(output.read_bytes()))
        assert blocks[-1].payload_size == len(program) % 256

    def test_long_option_names(self, inputs):
        bootrom, progdata, output = inputs
        rc = main([
            "--bootrom", str(bootrom),
            "--progdata", str(progdata),
            "--output", str(output),
        ])
        assert rc == 0
        assert output.exists()

    def test_missing_input(self, inputs, capsys):
        _, progdata, output = inputs
        rc = _run(output.parent / "missing.bin", progdata, output)
        assert rc == 1
        assert "error:" in capsys.readouterr().err
        assert not output.exists()

    def test_oversized_bootrom(self, inputs, capsys):
        bootrom, progdata, output = inputs
        bootrom.write_bytes(b"\x00" * 300)
        assert _run(bootrom, progdata, output) == 1
        assert "boot2 image is 300 bytes" in capsys.readouterr().err
        assert not output.exists()

    def test_missing_arguments(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["-b", "boot2.bin"])
        assert exc.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

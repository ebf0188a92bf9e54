import subprocess
from pathlib import Path
from unittest import mock

import pytest

from synce.jit import (
    TempFileNamer,
    jit_compile,
    load_binary,
    read_file,
    save_binary,
    write_file,
)


def _fake_run(payload):
    calls = []

    def run(command, check=False):
        calls.append(list(command))
        if command[0] == "ld":
            Path(command[-1]).write_bytes(payload)
        return subprocess.CompletedProcess(command, 0)

    return run, calls


def test_binary_round_trip(tmp_path):
    target = tmp_path / "prog.bin"
    data = bytes(range(256))
    save_binary(data, target)
    assert load_binary(target) == data


def test_load_binary_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_binary(tmp_path / "missing.bin")


def test_text_round_trip(tmp_path):
    target = tmp_path / "a.txt"
    write_file(target, "line one\nline two\n")
    assert read_file(target) == "line one\nline two\n"


def test_read_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_file(tmp_path / "nope.txt")


def test_write_file_bad_directory(tmp_path):
    with pytest.raises(OSError):
        write_file(tmp_path / "no" / "such" / "dir.txt", "x")


def test_temp_namer_counts_per_extension(tmp_path):
    namer = TempFileNamer(tmp_path)
    first = namer.next_name("s")
    second = namer.next_name(".s")
    other = namer.next_name("o")
    assert Path(first) == tmp_path / "tmp_0.s"
    assert Path(second) == tmp_path / "tmp_1.s"
    assert Path(other) == tmp_path / "tmp_0.o"


def test_temp_namer_default_directory():
    assert Path(TempFileNamer().next_name("log")) == Path("output") / "tmp_0.log"


def test_jit_compile_runs_assembler_and_linker(tmp_path):
    run, calls = _fake_run(b"\x7fELF")
    with mock.patch("synce.jit.subprocess.run", side_effect=run):
        result = jit_compile("section .text\n", tmp_path)
    assert result == b"\x7fELF"
    assert [call[0] for call in calls] == ["nasm", "ld"]
    assert calls[0][1:3] == ["-f", "elf32"]
    assert calls[1][1:3] == ["-m", "elf_i386"]
    assert (tmp_path / "tmp.s").read_text() == "section .text\n"


def test_jit_compile_missing_tools_gives_empty(tmp_path):
    with mock.patch("synce.jit.subprocess.run", side_effect=FileNotFoundError):
        assert jit_compile("nop\n", tmp_path) == b""


def test_jit_compile_no_output_gives_empty(tmp_path):
    (tmp_path / "program.bin").write_bytes(b"stale")

    def run(command, check=False):
        return subprocess.CompletedProcess(command, 1)

    with mock.patch("synce.jit.subprocess.run", side_effect=run):
        assert jit_compile("nop\n", tmp_path) == b""
"""Assemble and link NASM code into a binary, plus file helpers."""

from __future__ import annotations

import subprocess
from collections import Counter
from os import PathLike
from pathlib import Path
from typing import Union

PathType = Union[str, PathLike]

DEFAULT_WORKDIR = "output"


def jit_compile(nasm_code: str, workdir: PathType = DEFAULT_WORKDIR) -> bytes:
    """Assemble and link NASM code with nasm and ld, returning the binary.

    Returns empty bytes when the tools are missing or produce no binary.
    """
    directory = Path(workdir)
    directory.mkdir(parents=True, exist_ok=True)
    asm_file = directory / "tmp.s"
    obj_file = directory / "tmp.o"
    bin_file = directory / "program.bin"

    asm_file.write_text(nasm_code, encoding="utf-8")
    if bin_file.exists():
        bin_file.unlink()

    commands = [
        ["nasm", "-f", "elf32", str(asm_file), "-o", str(obj_file)],
        ["ld", "-m", "elf_i386", str(obj_file), "-o", str(bin_file)],
    ]
    try:
        for command in commands:
            subprocess.run(command, check=False)
    except FileNotFoundError:
        return b""

    try:
        return bin_file.read_bytes()
    except OSError:
        return b""


def save_binary(data: bytes, filename: PathType) -> None:
    """Write raw bytes to a file."""
    with open(filename, "wb") as handle:
        handle.write(bytes(data))


def load_binary(filename: PathType) -> bytes:
    """Read raw bytes from a file; raises OSError if it cannot be opened."""
    with open(filename, "rb") as handle:
        return handle.read()


def read_file(filename: PathType) -> str:
    """Read a text file; raises OSError if it cannot be opened."""
    with open(filename, encoding="utf-8") as handle:
        return handle.read()


def write_file(filename: PathType, content: str) -> None:
    """Write a text file; raises OSError if it cannot be opened."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(content)


class TempFileNamer:
    """Hands out numbered temporary file names, counting each extension apart."""

    def __init__(self, directory: PathType = DEFAULT_WORKDIR) -> None:
        self.directory = Path(directory)
        self._counters: Counter = Counter()

    def next_name(self, extension: str) -> str:
        """Return the next name such as ``output/tmp_0.s`` for an extension."""
        ext = extension.lstrip(".")
        number = self._counters[ext]
        self._counters[ext] += 1
        return str(self.directory / f"tmp_{number}.{ext}")
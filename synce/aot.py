"""Ahead-of-time output of IR blocks as NASM assembly and executables."""

from __future__ import annotations

import shutil
import subprocess
import tempfile
from os import PathLike
from pathlib import Path
from typing import Union

from synce.engine import IRBlock, OpCode

PathType = Union[str, PathLike]

_HEADER = "section .text\nglobal _start\n_start:\n"
_FOOTER = "mov eax, 1\nint 0x80\n"


def render_nasm(block: IRBlock) -> str:
    """Return NASM assembly for a block; unsupported instructions are skipped."""
    lines = [_HEADER]
    for instr in block.instructions:
        if instr.op is OpCode.LOAD:
            lines.append(f"mov eax, {instr.arg2}\n")
        elif instr.op is OpCode.PRINT:
            lines.append("mov ebx, eax\n")
    lines.append(_FOOTER)
    return "".join(lines)


def write_nasm(block: IRBlock, filename: PathType) -> None:
    """Write the block's NASM assembly to a file."""
    Path(filename).write_text(render_nasm(block), encoding="utf-8")


def compile_to_executable(block: IRBlock, output_path: PathType) -> bool:
    """Assemble and link the block with nasm and ld into output_path.

    Returns False when the tools are missing or produce no executable.
    """
    with tempfile.TemporaryDirectory() as work:
        workdir = Path(work)
        asm_file = workdir / "program.asm"
        obj_file = workdir / "program.o"
        exe_file = workdir / "output.exe"
        write_nasm(block, asm_file)
        try:
            subprocess.run(
                ["nasm", "-f", "elf32", str(asm_file), "-o", str(obj_file)], check=False
            )
            subprocess.run(
                ["ld", "-m", "elf_i386", str(obj_file), "-o", str(exe_file)], check=False
            )
        except FileNotFoundError:
            return False
        if not exe_file.exists():
            return False
        shutil.move(str(exe_file), str(output_path))
    return True
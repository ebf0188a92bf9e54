"""Command-line compiler driver for Synce source files."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path
from typing import Dict, List, Optional, Union

from synce.codegen import generate_nasm
from synce.hexast import generate_hex_ast
from synce.ir import generate_ir, save_output
from synce.jit import jit_compile, save_binary
from synce.lexer import lex_file
from synce.parser import parse_tokens

USAGE = "Usage: syncec <source.synce>"


def compile_file(
    filename: Union[str, PathLike], output_dir: Union[str, PathLike] = "output"
) -> Dict[str, Path]:
    """Run the whole pipeline on a file and return the paths written, by kind."""
    print(f"[SYNCE] Compiling: {filename}")
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    tokens = lex_file(filename)
    tree = parse_tokens(tokens)
    ir_text = generate_ir(tree)
    hex_ast = generate_hex_ast(tree)
    nasm_code = generate_nasm(ir_text)
    binary = jit_compile(nasm_code, out)

    written = {
        "ir": out / "program.oct",
        "ast": out / "program.ast.hex",
        "asm": out / "program.asm",
        "bin": out / "program.bin",
    }
    save_output(ir_text, written["ir"])
    save_output(hex_ast, written["ast"])
    save_output(nasm_code, written["asm"])
    save_binary(binary, written["bin"])

    print("[SYNCE] Compilation Complete.")
    return written


def main(argv: Optional[List[str]] = None) -> int:
    """Compile the source file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(USAGE, file=sys.stderr)
        return 1
    try:
        compile_file(args[0])
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
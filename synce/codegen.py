"""Turn Synce IR text into source code for several target languages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Union

_DECL_RE = re.compile(r"0[0-9]+ DECL (\w+)", re.ASCII)
_LIT_RE = re.compile(r"0[0-9]+ LIT (\d+)", re.ASCII)
_ID_RE = re.compile(r"0[0-9]+ ID (\w+)", re.ASCII)


class Target(Enum):
    """Languages that IR can be translated into."""

    NASM = "nasm"
    CPP = "cpp"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"
    JAVASCRIPT = "javascript"
    JAVA = "java"
    C = "c"


@dataclass(frozen=True)
class _Template:
    header: str
    decl: str
    lit: str
    ident: str
    footer: str

    def render(self, ir: str) -> str:
        parts = [self.header]
        for line in split_lines(ir):
            match = _DECL_RE.fullmatch(line)
            if match:
                parts.append(self.decl.format(match.group(1)))
                continue
            match = _LIT_RE.fullmatch(line)
            if match:
                parts.append(self.lit.format(match.group(1)))
                continue
            match = _ID_RE.fullmatch(line)
            if match:
                parts.append(self.ident.format(match.group(1)))
        parts.append(self.footer)
        return "".join(parts)


_TEMPLATES: Dict[Target, _Template] = {
    Target.NASM: _Template(
        header=(
            "section .data\n"
            "msg db 'Compiled Synce Program', 0xA, 0\n"
            "section .text\n"
            "global _start\n"
            "_start:\n"
        ),
        decl="    ; declare {0}\n    mov eax, 0\n",
        lit="    mov eax, {0}\n",
        ident="    ; use identifier {0}\n",
        footer="    mov ebx, 0\n    mov eax, 1\n    int 0x80\n",
    ),
    Target.CPP: _Template(
        header="#include <iostream>\nint main() {\n",
        decl="    int {0};\n",
        lit="    int value = {0};\n",
        ident='    std::cout << "{0}" << std::endl;\n',
        footer="    return 0;\n}\n",
    ),
    Target.PYTHON: _Template(
        header="def main():\n",
        decl="    {0} = None\n",
        lit="    value = {0}\n",
        ident="    print('{0}')\n",
        footer="if __name__ == '__main__':\n    main()\n",
    ),
    Target.GO: _Template(
        header='package main\nimport "fmt"\nfunc main() {\n',
        decl="    var {0} int\n",
        lit="    value := {0}\n",
        ident='    fmt.Println("{0}")\n',
        footer="}\n",
    ),
    Target.RUST: _Template(
        header="fn main() {\n",
        decl="    let mut {0}: i32;\n",
        lit="    let value = {0};\n",
        ident='    println!("{{}}", "{0}");\n',
        footer="}\n",
    ),
    Target.JAVASCRIPT: _Template(
        header="function main() {\n",
        decl="    let {0};\n",
        lit="    let value = {0};\n",
        ident="    console.log('{0}');\n",
        footer="}\nmain();\n",
    ),
    Target.JAVA: _Template(
        header="public class Main {\n    public static void main(String[] args) {\n",
        decl="        int {0};\n",
        lit="        int value = {0};\n",
        ident='        System.out.println("{0}");\n',
        footer="    }\n}\n",
    ),
    Target.C: _Template(
        header="#include <stdio.h>\nint main() {\n",
        decl="    int {0};\n",
        lit="    int value = {0};\n",
        ident='    printf("%s\\n", "{0}");\n',
        footer="    return 0;\n}\n",
    ),
}


def split_lines(text: str) -> List[str]:
    """Split text on newlines; a trailing newline does not add an empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def generate_nasm(ir: str) -> str:
    """Translate IR into 32-bit NASM assembly."""
    return _TEMPLATES[Target.NASM].render(ir)


def generate_cpp(ir: str) -> str:
    """Translate IR into a C++ program."""
    return _TEMPLATES[Target.CPP].render(ir)


def generate_python(ir: str) -> str:
    """Translate IR into a Python script."""
    return _TEMPLATES[Target.PYTHON].render(ir)


def generate_go(ir: str) -> str:
    """Translate IR into a Go program."""
    return _TEMPLATES[Target.GO].render(ir)


def generate_rust(ir: str) -> str:
    """Translate IR into a Rust program."""
    return _TEMPLATES[Target.RUST].render(ir)


def generate_javascript(ir: str) -> str:
    """Translate IR into a JavaScript program."""
    return _TEMPLATES[Target.JAVASCRIPT].render(ir)


def generate_java(ir: str) -> str:
    """Translate IR into a Java program."""
    return _TEMPLATES[Target.JAVA].render(ir)


def generate_c(ir: str) -> str:
    """Translate IR into a C program."""
    return _TEMPLATES[Target.C].render(ir)


_GENERATORS: Dict[Target, Callable[[str], str]] = {
    Target.NASM: generate_nasm,
    Target.CPP: generate_cpp,
    Target.PYTHON: generate_python,
    Target.GO: generate_go,
    Target.RUST: generate_rust,
    Target.JAVASCRIPT: generate_javascript,
    Target.JAVA: generate_java,
    Target.C: generate_c,
}


def generate(ir: str, target: Union[Target, str]) -> str:
    """Translate IR for the given target; raises ValueError for an unknown one."""
    return _GENERATORS[Target(target)](ir)
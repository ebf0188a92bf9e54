"""Octal-numbered intermediate representation for Synce programs."""

from __future__ import annotations

from os import PathLike
from typing import Optional, Union

from synce.parser import ASTNode, NodeType

DEFAULT_START = 700

_LABELS = {
    NodeType.DECLARATION: "DECL",
    NodeType.LITERAL: "LIT",
    NodeType.IDENTIFIER: "ID",
}


class IRGenerator:
    """Emits IR lines, numbering each with a running code printed in octal."""

    def __init__(self, start: int = DEFAULT_START) -> None:
        self.next_code = start

    def _emit(self, label: str, value: str) -> str:
        line = f"0{self.next_code:o} {label} {value}\n"
        self.next_code += 1
        return line

    def generate(self, node: Optional[ASTNode]) -> str:
        """Return the IR text for a node and its relevant children."""
        if node is None:
            return ""
        if node.type is NodeType.PROGRAM:
            return "".join(self.generate(child) for child in node.children)
        label = _LABELS.get(node.type)
        if label is None:
            return ""
        text = self._emit(label, node.value)
        if node.type is NodeType.DECLARATION and node.children:
            text += self.generate(node.children[0])
        return text


def generate_ir(root: Optional[ASTNode], start: int = DEFAULT_START) -> str:
    """Generate IR for a whole tree; raises ValueError for a missing root."""
    if root is None:
        raise ValueError("AST root is null")
    return IRGenerator(start).generate(root)


def save_output(content: str, filename: Union[str, PathLike]) -> None:
    """Write text to a file, raising OSError on failure."""
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(content)


def read_input(filename: Union[str, PathLike]) -> str:
    """Read a text file, returning an empty string if it cannot be opened."""
    try:
        with open(filename, encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        return ""
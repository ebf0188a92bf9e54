"""Parser turning a token stream into a Synce syntax tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from synce.lexer import Token, TokenType


class NodeType(Enum):
    """Kinds of syntax tree node."""

    PROGRAM = "program"
    STATEMENT = "statement"
    DECLARATION = "declaration"
    ASSIGNMENT = "assignment"
    FUNCTION_CALL = "function_call"
    LITERAL = "literal"
    IDENTIFIER = "identifier"


@dataclass
class ASTNode:
    """A syntax tree node holding a value and child nodes."""

    type: NodeType
    value: str = ""
    children: List["ASTNode"] = field(default_factory=list)


_EOF = Token(TokenType.END_OF_FILE, "", 0, 0)


class _Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _peek(self) -> Token:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else _EOF

    def _advance(self) -> Token:
        token = self._peek()
        self._pos += 1
        return token

    def _statement(self) -> Optional[ASTNode]:
        token = self._peek()
        if token.type is TokenType.KEYWORD and token.value == "let":
            self._advance()
            name = self._advance()
            self._advance()  # '='
            expr = self._expression()
            return ASTNode(NodeType.DECLARATION, name.value, [expr])
        return None

    def _expression(self) -> ASTNode:
        token = self._advance()
        if token.type in (TokenType.NUMBER, TokenType.STRING):
            return ASTNode(NodeType.LITERAL, token.value)
        if token.type is TokenType.IDENTIFIER:
            return ASTNode(NodeType.IDENTIFIER, token.value)
        return ASTNode(NodeType.STATEMENT)

    def parse(self) -> ASTNode:
        root = ASTNode(NodeType.PROGRAM, "program")
        while self._peek().type is not TokenType.END_OF_FILE:
            statement = self._statement()
            if statement is not None:
                root.children.append(statement)
            else:
                self._advance()
        return root


def parse_tokens(tokens: Sequence[Token]) -> ASTNode:
    """Parse tokens into a program node; unrecognised tokens are skipped."""
    return _Parser(tokens).parse()
"""Tokeniser for Synce source text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Iterator, List, Union

KEYWORDS = frozenset(
    {
        "let", "val", "func", "procedure", "return", "if", "else", "while",
        "break", "continue", "await", "sync", "throw", "catch", "try",
    }
)


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    IDENTIFIER = "identifier"
    NUMBER = "number"
    KEYWORD = "keyword"
    SYMBOL = "symbol"
    OPERATOR = "operator"
    STRING = "string"
    END_OF_FILE = "eof"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Token:
    """A lexed token with its 1-based line and 0-based column."""

    type: TokenType
    value: str
    line: int
    col: int


_TOKEN_RE = re.compile(
    r"(?P<space>[ \t\n\v\f\r]+)"
    r"|(?P<word>[A-Za-z][A-Za-z0-9_]*)"
    r"|(?P<number>[0-9]+)"
    r'|"(?P<string>[^"]*)"?'
    r"|(?P<symbol>.)",
    re.DOTALL,
)


def _lex_line(line: str, line_num: int) -> Iterator[Token]:
    for match in _TOKEN_RE.finditer(line):
        kind = match.lastgroup
        col = match.start()
        if kind == "space":
            continue
        if kind == "word":
            word = match.group("word")
            token_type = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER
            yield Token(token_type, word, line_num, col)
        elif kind == "number":
            yield Token(TokenType.NUMBER, match.group("number"), line_num, col)
        elif kind == "string":
            yield Token(TokenType.STRING, match.group("string"), line_num, col)
        else:
            yield Token(TokenType.SYMBOL, match.group("symbol"), line_num, col)


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def lex_source(text: str) -> List[Token]:
    """Split source text into tokens, ending with an end-of-file token."""
    lines = _split_lines(text)
    tokens: List[Token] = []
    for line_num, line in enumerate(lines, start=1):
        tokens.extend(_lex_line(line, line_num))
    tokens.append(Token(TokenType.END_OF_FILE, "", len(lines) + 1, 0))
    return tokens


def lex_file(filename: Union[str, PathLike]) -> List[Token]:
    """Read and tokenise a source file; raises OSError if it cannot be read."""
    with open(filename, encoding="utf-8") as handle:
        return lex_source(handle.read())
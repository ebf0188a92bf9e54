"""Synce language toolchain (lexer, parser, IR, hex AST, code generation) and runtime utilities."""

__version__ = "0.1.0"